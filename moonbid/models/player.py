"""Player model."""

from dataclasses import dataclass, replace

from moonbid.models.card import Card, sort_hand
from moonbid.models.enums import Role, Suit


@dataclass(frozen=True)
class PlayerState:
    """Represents a player in the game.

    Attributes:
        id: Unique player identifier
        name: Player's display name
        hand: Cards currently held (kept sorted)
        bid: Current round bid (None until placed)
        tricks: Tricks won this round
        score: Cumulative score
        lunar_favor: Lunar favor accumulated over the game
        power_used: Whether a power already took effect this round
        won_cards: Winning cards of every trick this player took
        role: Cooperative mode role
        doubled_tricks: Doubled tricks won this round
        round_scores: Score earned in each completed round
        round_tricks: Tricks won in each completed round
        round_bids: Bid placed in each completed round
        insights: IDs of cards revealed to this player by powers

    """

    id: str
    name: str
    hand: tuple[Card, ...] = ()
    bid: int | None = None
    tricks: int = 0
    score: int = 0
    lunar_favor: int = 0
    power_used: bool = False
    won_cards: tuple[Card, ...] = ()
    role: Role | None = None
    doubled_tricks: int = 0
    round_scores: tuple[int, ...] = ()
    round_tricks: tuple[int, ...] = ()
    round_bids: tuple[int, ...] = ()
    insights: tuple[str, ...] = ()

    def find_card(self, card_id: str) -> Card | None:
        """Get a card from the hand by ID."""
        for card in self.hand:
            if card.id == card_id:
                return card
        return None

    def has_suit(self, suit: Suit) -> bool:
        """Check if player holds at least one card of a suit."""
        return any(card.suit == suit for card in self.hand)

    def without_card(self, card_id: str) -> "PlayerState":
        """Return a copy with a card removed from the hand."""
        return replace(self, hand=tuple(card for card in self.hand if card.id != card_id))

    def with_hand(self, cards: list[Card]) -> "PlayerState":
        """Return a copy holding exactly these cards."""
        return replace(self, hand=sort_hand(cards))

    def made_bid(self) -> bool:
        """Check if player has made their bid."""
        return self.bid is not None

    def bid_correct(self) -> bool:
        """Check if player's bid matches tricks won."""
        return self.bid == self.tricks

    def reset_round(self) -> "PlayerState":
        """Return a copy with per-round state cleared."""
        return replace(
            self,
            hand=(),
            bid=None,
            tricks=0,
            power_used=False,
            doubled_tricks=0,
        )

    def __str__(self) -> str:
        """Return string representation."""
        role_str = f" ({self.role.value})" if self.role else ""
        return f"{self.name}{role_str} - Score: {self.score}"
