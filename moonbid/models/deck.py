"""Deck model for shuffling and dealing cards."""

import random

from moonbid.models.card import Card, build_catalog, sort_hand


class Deck:
    """
    Represents a Moon Bid deck.

    The deck contains 65 cards total:
    - 52 suit cards (stars, herbs, potions, crystals; ranks 1-13)
    - 8 lunar blessing cards (one per moon phase)
    - 5 elemental embodiment cards (one per element)

    Shuffling draws from the generator handed in, never from the
    module-level ``random`` state.
    """

    def __init__(self, rng: random.Random) -> None:
        """Initialize an empty deck bound to a random source."""
        self.rng = rng
        self.cards: list[Card] = []

    def fill(self) -> None:
        """Fill the deck with a fresh copy of the catalog."""
        self.cards = build_catalog()

    def shuffle(self) -> None:
        """Fill and shuffle the deck."""
        self.fill()
        self.rng.shuffle(self.cards)

    def deal(self, num_players: int, cards_per_player: int) -> list[tuple[Card, ...]]:
        """
        Deal cards to players one at a time, round-robin, from the top.

        Args:
            num_players: Number of players to deal to
            cards_per_player: Number of cards per player

        Returns:
            List of sorted hands; dealt cards are removed from the deck
        """
        if not self.cards:
            self.shuffle()

        hands: list[list[Card]] = [[] for _ in range(num_players)]
        for _ in range(cards_per_player):
            for hand in hands:
                if self.cards:
                    hand.append(self.cards.pop(0))

        return [sort_hand(hand) for hand in hands]

    def remaining(self) -> tuple[Card, ...]:
        """Cards left after dealing, top first."""
        return tuple(self.cards)
