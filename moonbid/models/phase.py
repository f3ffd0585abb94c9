"""Game phases.

Each phase is its own type and carries only the data that exists in that
phase: the in-progress trick lives in ``Playing`` and nowhere else, and the
final report lives in ``Finalized``.
"""

from dataclasses import dataclass

from moonbid.models.reward import GrantedReward
from moonbid.models.trick import Trick


@dataclass(frozen=True)
class WinnerReport:
    """Who won a finished game."""

    winner_ids: tuple[str, ...]
    winner_names: tuple[str, ...]
    scores: tuple[int, ...]
    is_team_win: bool


@dataclass(frozen=True)
class GameOutcome:
    """Everything settled at finalization."""

    winners: WinnerReport
    rewards: tuple[GrantedReward, ...] = ()
    winning_condition_met: bool = False


@dataclass(frozen=True)
class Bidding:
    """Players are placing bids."""

    name = "bidding"


@dataclass(frozen=True)
class Playing:
    """Players are playing cards into the current trick."""

    trick: Trick

    name = "playing"


@dataclass(frozen=True)
class Scoring:
    """Every hand is empty; the round is waiting to be scored."""

    name = "scoring"


@dataclass(frozen=True)
class Finalized:
    """The game is over."""

    outcome: GameOutcome

    name = "finalized"


GamePhase = Bidding | Playing | Scoring | Finalized
