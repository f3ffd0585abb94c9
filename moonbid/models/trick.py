"""Trick model for a single trick within a round."""

from dataclasses import dataclass, replace

from moonbid.models.card import Card
from moonbid.models.enums import MoonPhase, Suit


@dataclass(frozen=True)
class PlayedCard:
    """Represents a card played by a player in a trick."""

    player_id: str
    card: Card


def _best_of_suit(plays: tuple[PlayedCard, ...], suit: Suit) -> PlayedCard | None:
    """Highest effective value among plays of one suit; earliest play wins ties."""
    best: PlayedCard | None = None
    for played in plays:
        if played.card.suit != suit:
            continue
        if best is None or played.card.effective_value > best.card.effective_value:
            best = played
    return best


def determine_winner(
    plays: tuple[PlayedCard, ...],
    lead_suit: Suit | None,
    trump_suit: Suit | None = None,
    moon_phase: MoonPhase | None = None,
) -> PlayedCard | None:
    """Determine the winning play of a full trick.

    Args:
        plays: Cards played in order
        lead_suit: Suit of the first card played
        trump_suit: Trump suit of the session, if the mode has one
        moon_phase: Active lunar phase

    Returns:
        Winning play, or None when nobody takes the trick

    Rules:
        1. Highest effective value among trump cards wins
        2. With no trump card in the trick, highest lead suit card wins
        3. Effective value is the rank, plus 10 for special cards
        4. Last Quarter: if another play has the same rank as the
           provisional winner, nobody wins

    """
    if not plays:
        return None

    winner: PlayedCard | None = None
    if trump_suit is not None:
        winner = _best_of_suit(plays, trump_suit)
    if winner is None and lead_suit is not None:
        winner = _best_of_suit(plays, lead_suit)

    if winner is not None and moon_phase == MoonPhase.LAST_QUARTER:
        # Compared against the provisional winner only
        if any(p is not winner and p.card.rank == winner.card.rank for p in plays):
            return None

    return winner


@dataclass(frozen=True)
class Trick:
    """Represents a single trick within a round.

    Attributes:
        lead_suit: Suit of the first card played (None while empty)
        plays: Cards played so far, in order
        winner: ID of the player who took the trick
        winning_card: Card that took the trick
        doubled: Set by the ``double`` power
        voided: Set by the ``nullify`` power
        protected: Set by the ``protect`` power; blocks a later ``nullify``
        stolen_by: Set by the ``steal`` power; the stealer takes a won trick

    """

    lead_suit: Suit | None = None
    plays: tuple[PlayedCard, ...] = ()
    winner: str | None = None
    winning_card: Card | None = None
    doubled: bool = False
    voided: bool = False
    protected: bool = False
    stolen_by: str | None = None

    def get_all_cards(self) -> list[Card]:
        """Get all cards played in this trick."""
        return [p.card for p in self.plays]

    def is_empty(self) -> bool:
        """Check if no card has been played yet."""
        return not self.plays

    def is_complete(self, num_players: int) -> bool:
        """Check if all players have played a card."""
        return len(self.plays) == num_players

    def leader(self) -> str | None:
        """ID of the player who led the trick."""
        return self.plays[0].player_id if self.plays else None

    def with_play(self, player_id: str, card: Card) -> "Trick":
        """Return a copy with a card appended; the first card sets the lead suit."""
        lead_suit = self.lead_suit if self.plays else card.suit
        return replace(self, lead_suit=lead_suit, plays=(*self.plays, PlayedCard(player_id, card)))

    def with_last_card(self, card: Card) -> "Trick":
        """Return a copy with the most recent play's card replaced."""
        if not self.plays:
            return self
        last = self.plays[-1]
        return replace(self, plays=(*self.plays[:-1], PlayedCard(last.player_id, card)))

    def resolve(self, trump_suit: Suit | None, moon_phase: MoonPhase) -> "Trick":
        """Return the trick with its winner settled.

        A voided trick is returned with no winner straight away.
        """
        if self.voided:
            return replace(self, winner=None, winning_card=None)

        winning_play = determine_winner(self.plays, self.lead_suit, trump_suit, moon_phase)
        if winning_play is None:
            return replace(self, winner=None, winning_card=None)

        winner = self.stolen_by or winning_play.player_id
        return replace(self, winner=winner, winning_card=winning_play.card)

    def get_valid_cards(self, hand: tuple[Card, ...]) -> list[Card]:
        """Get the cards from a hand that may legally be played next.

        - If leading, any card can be played
        - If following, the lead suit must be followed when held
        """
        if not hand:
            return []
        if not self.plays or self.lead_suit is None:
            return list(hand)

        following = [card for card in hand if card.suit == self.lead_suit]
        return following or list(hand)

    def __str__(self) -> str:
        """Return string representation of the trick."""
        if self.winner:
            return f"Trick: Winner {self.winner}"
        return f"Trick: {len(self.plays)} cards played"
