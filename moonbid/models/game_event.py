"""Game event model for replay system.

Captures every command applied to a game, plus what it caused, so a game
can be inspected afterwards or replayed from its seed.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class GameEventType(str, Enum):
    """Types of game events that can be recorded."""

    # Game lifecycle
    GAME_STARTED = "GAME_STARTED"
    GAME_ENDED = "GAME_ENDED"

    # Round events
    ROUND_STARTED = "ROUND_STARTED"
    ROUND_ENDED = "ROUND_ENDED"

    # Bidding
    BID_PLACED = "BID_PLACED"
    BIDDING_COMPLETE = "BIDDING_COMPLETE"

    # Card play
    CARD_PLAYED = "CARD_PLAYED"
    POWER_USED = "POWER_USED"
    TRICK_WON = "TRICK_WON"
    TRICK_VOIDED = "TRICK_VOIDED"


@dataclass
class GameEvent:
    """Represents a single game event for replay."""

    game_id: str
    event_type: GameEventType
    timestamp: datetime = field(default_factory=_utc_now)
    round_number: int = 0
    trick_number: int | None = None
    player_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/transmission."""
        return {
            "game_id": self.game_id,
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "round_number": self.round_number,
            "trick_number": self.trick_number,
            "player_id": self.player_id,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            event_type=GameEventType(data["event_type"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            round_number=data.get("round_number", 0),
            trick_number=data.get("trick_number"),
            player_id=data.get("player_id"),
            data=data.get("data", {}),
        )


@dataclass
class GameHistory:
    """Complete game history for replay."""

    game_id: str
    mode: str
    moon_phase: str
    season: str
    seed: int | None
    created_at: datetime
    ended_at: datetime
    players: list[dict[str, Any]]  # Player info with final scores
    winner_ids: list[str]
    total_rounds: int
    events: list[GameEvent] = field(default_factory=list)

    def commands(self) -> list[GameEvent]:
        """Bids and plays, in the order they were applied."""
        return [
            e
            for e in self.events
            if e.event_type in (GameEventType.BID_PLACED, GameEventType.CARD_PLAYED)
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "game_id": self.game_id,
            "mode": self.mode,
            "moon_phase": self.moon_phase,
            "season": self.season,
            "seed": self.seed,
            "created_at": self.created_at.isoformat(),
            "ended_at": self.ended_at.isoformat(),
            "players": self.players,
            "winner_ids": self.winner_ids,
            "total_rounds": self.total_rounds,
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameHistory":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            mode=data["mode"],
            moon_phase=data["moon_phase"],
            season=data["season"],
            seed=data.get("seed"),
            created_at=datetime.fromisoformat(data["created_at"]),
            ended_at=datetime.fromisoformat(data["ended_at"]),
            players=data["players"],
            winner_ids=data.get("winner_ids", []),
            total_rounds=data["total_rounds"],
            events=[GameEvent.from_dict(e) for e in data.get("events", [])],
        )

    def get_summary(self) -> dict[str, Any]:
        """Get summary without full events (for listing)."""
        return {
            "game_id": self.game_id,
            "mode": self.mode,
            "created_at": self.created_at.isoformat(),
            "players": self.players,
            "winner_ids": self.winner_ids,
            "total_rounds": self.total_rounds,
            "event_count": len(self.events),
        }
