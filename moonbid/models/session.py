"""Game session model: the immutable snapshot every engine operation works on."""

from dataclasses import dataclass, field, replace
from typing import Any

from moonbid.models.card import Card
from moonbid.models.enums import GameMode, MoonPhase, Season, Suit
from moonbid.models.phase import Bidding, Finalized, GamePhase, Playing
from moonbid.models.player import PlayerState
from moonbid.models.reward import Reward
from moonbid.models.rules import ModeRules, get_mode_rules
from moonbid.models.trick import Trick


@dataclass(frozen=True)
class PhaseBonus:
    """Summary of the active lunar phase shown to players."""

    description: str
    effect: str
    bonus_suit: Suit | None = None


@dataclass(frozen=True)
class GameSession:
    """Represents a complete Moon Bid game at one point in time.

    Sessions are never mutated: every operation returns a new snapshot.

    Attributes:
        id: Unique game identifier
        players: Players in seat order
        phase: Current phase
        mode: Selected game mode
        moon_phase: Active lunar phase
        season: Active season
        current_player_index: Seat whose turn it is
        round_number: Current round (1-based)
        total_rounds: Rounds in the game
        draw_pile: Cards not dealt this round, top first
        completed_tricks: Tricks resolved this round
        trick_history: Every trick resolved in the game
        trump_suit: Trump suit, if the mode has one
        phase_bonus: Summary of the lunar phase
        rewards: Rewards on offer
        lunar_energy: Shared lunar energy pool
        team_score: Shared team score (cooperative mode only)
        round_starter_index: Seat that leads the first trick of the round
        seed: Seed the random source was created from, when known
        rng_state: State of the random source after the last draw

    """

    id: str
    players: tuple[PlayerState, ...]
    phase: GamePhase
    mode: GameMode
    moon_phase: MoonPhase
    season: Season
    current_player_index: int = 0
    round_number: int = 1
    total_rounds: int = 1
    draw_pile: tuple[Card, ...] = ()
    completed_tricks: tuple[Trick, ...] = ()
    trick_history: tuple[Trick, ...] = ()
    trump_suit: Suit | None = None
    phase_bonus: PhaseBonus | None = None
    rewards: tuple[Reward, ...] = ()
    lunar_energy: int = 0
    team_score: int | None = None
    round_starter_index: int = 0
    seed: int | None = None
    rng_state: Any = field(default=None, repr=False, compare=False)

    @property
    def rules(self) -> ModeRules:
        """Rule record of the session's mode."""
        return get_mode_rules(self.mode)

    @property
    def current_player(self) -> PlayerState:
        """Player whose turn it is."""
        return self.players[self.current_player_index]

    @property
    def current_trick(self) -> Trick | None:
        """In-progress trick (only exists while playing)."""
        if isinstance(self.phase, Playing):
            return self.phase.trick
        return None

    def is_bidding(self) -> bool:
        """Check if players are bidding."""
        return isinstance(self.phase, Bidding)

    def is_finalized(self) -> bool:
        """Check if the game is over."""
        return isinstance(self.phase, Finalized)

    def get_player(self, player_id: str) -> PlayerState | None:
        """Get a player by ID."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def player_index(self, player_id: str) -> int | None:
        """Get a player's seat index by ID."""
        for index, player in enumerate(self.players):
            if player.id == player_id:
                return index
        return None

    def next_index(self, index: int) -> int:
        """Seat after ``index`` in turn order."""
        return (index + 1) % len(self.players)

    def with_player(self, updated: PlayerState) -> "GameSession":
        """Return a copy with one player replaced (matched by ID)."""
        return replace(
            self,
            players=tuple(updated if p.id == updated.id else p for p in self.players),
        )

    def cards_accounted_for(self) -> int:
        """Cards in hands, tricks and the draw pile this round."""
        in_hands = sum(len(p.hand) for p in self.players)
        in_tricks = sum(len(t.plays) for t in self.completed_tricks)
        trick = self.current_trick
        in_progress = len(trick.plays) if trick else 0
        return in_hands + in_tricks + in_progress + len(self.draw_pile)

    def all_hands_empty(self) -> bool:
        """Check if every card of the round has been played."""
        return all(not p.hand for p in self.players)

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Game {self.id}: {len(self.players)} players, "
            f"Round {self.round_number}/{self.total_rounds}, Phase: {self.phase.name}"
        )
