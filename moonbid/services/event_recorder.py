"""Event recorder service for capturing game events during gameplay.

The engine itself is pure; callers hand the recorder the snapshots before
and after each command and it works out what happened. A finished game's
history can be replayed from its seed to rebuild the final session.
"""

from datetime import UTC, datetime

from moonbid.config import Settings
from moonbid.config import settings as default_settings
from moonbid.engine.bidding import place_bid
from moonbid.engine.game import initialize_game
from moonbid.engine.play import play_card
from moonbid.engine.powers import can_use_power
from moonbid.models.game_event import GameEvent, GameEventType, GameHistory
from moonbid.models.phase import Finalized, Playing
from moonbid.models.session import GameSession
from moonbid.services.log_service import LogService

log_service = LogService(__name__)


class EventRecorder:
    """Records game events for later replay."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the event recorder.

        Sets up in-memory storage for game events during gameplay and completed game histories.
        """
        self.settings = settings or default_settings
        # Key: game_id, Value: list of events
        self._events: dict[str, list[GameEvent]] = {}
        self._game_start_times: dict[str, datetime] = {}
        # Completed game histories
        self._histories: dict[str, GameHistory] = {}

    @property
    def enabled(self) -> bool:
        """Whether recording is switched on."""
        return self.settings.record_events

    def start_game(self, session: GameSession) -> None:
        """Initialize event recording for a new game."""
        if not self.enabled:
            return
        self._events[session.id] = []
        self._game_start_times[session.id] = datetime.now(UTC)

        self.record_event(
            session,
            GameEventType.GAME_STARTED,
            data={
                "players": [{"id": p.id, "name": p.name} for p in session.players],
                "mode": session.mode.value,
                "moon_phase": session.moon_phase.value,
                "season": session.season.value,
                "seed": session.seed,
                "lunar_energy": session.lunar_energy,
                "trump_suit": session.trump_suit.value if session.trump_suit else None,
            },
        )
        self._record_round_start(session)

    def record_event(
        self,
        session: GameSession,
        event_type: GameEventType,
        player_id: str | None = None,
        data: dict | None = None,
    ) -> None:
        """Record a single game event."""
        if not self.enabled:
            return
        event = GameEvent(
            game_id=session.id,
            event_type=event_type,
            round_number=session.round_number,
            trick_number=len(session.completed_tricks) + 1,
            player_id=player_id,
            data=data or {},
        )
        self._events.setdefault(session.id, []).append(event)

    def _record_round_start(self, session: GameSession) -> None:
        self.record_event(
            session,
            GameEventType.ROUND_STARTED,
            data={"hands": {p.id: [c.id for c in p.hand] for p in session.players}},
        )

    def record_bid(
        self, before: GameSession, after: GameSession, player_id: str, amount: int
    ) -> None:
        """Record a player's bid and, if it closed bidding, the switch to play."""
        self.record_event(before, GameEventType.BID_PLACED, player_id, {"bid": amount})
        if isinstance(after.phase, Playing):
            self.record_event(
                after,
                GameEventType.BIDDING_COMPLETE,
                data={"bids": {p.id: p.bid for p in after.players}},
            )

    def record_card_played(
        self, before: GameSession, after: GameSession, player_id: str, card_id: str
    ) -> None:
        """Record a card play and everything it set off."""
        player = before.get_player(player_id)
        card = player.find_card(card_id) if player else None
        self.record_event(before, GameEventType.CARD_PLAYED, player_id, {"card_id": card_id})

        if card is not None and card.has_power() and can_use_power(before, player):
            self.record_event(before, GameEventType.POWER_USED, player_id, {"power": card.power.value})

        if len(after.trick_history) > len(before.trick_history):
            trick = after.trick_history[-1]
            if trick.winner is not None:
                self.record_event(
                    before,
                    GameEventType.TRICK_WON,
                    trick.winner,
                    {"winning_card_id": trick.winning_card.id if trick.winning_card else None},
                )
            else:
                self.record_event(before, GameEventType.TRICK_VOIDED, data={"voided": trick.voided})

        round_over = after.round_number > before.round_number or isinstance(after.phase, Finalized)
        if round_over:
            self.record_event(
                before,
                GameEventType.ROUND_ENDED,
                data={"scores": {p.id: p.round_scores[-1] for p in after.players}},
            )
        if after.round_number > before.round_number:
            self._record_round_start(after)
        if isinstance(after.phase, Finalized):
            self.end_game(after)

    def end_game(self, session: GameSession) -> GameHistory | None:
        """Finalize game recording and create history."""
        if session.id not in self._events or not isinstance(session.phase, Finalized):
            return None

        winners = session.phase.outcome.winners
        self.record_event(
            session,
            GameEventType.GAME_ENDED,
            data={
                "final_scores": {p.id: p.score for p in session.players},
                "winner_ids": list(winners.winner_ids),
                "is_team_win": winners.is_team_win,
            },
        )

        history = GameHistory(
            game_id=session.id,
            mode=session.mode.value,
            moon_phase=session.moon_phase.value,
            season=session.season.value,
            seed=session.seed,
            created_at=self._game_start_times.get(session.id, datetime.now(UTC)),
            ended_at=datetime.now(UTC),
            players=[
                {"id": p.id, "name": p.name, "score": p.score}
                for p in sorted(session.players, key=lambda x: x.score, reverse=True)
            ],
            winner_ids=list(winners.winner_ids),
            total_rounds=session.total_rounds,
            events=self._events[session.id],
        )

        # Store history and clean up
        self._histories[session.id] = history
        del self._events[session.id]
        self._game_start_times.pop(session.id, None)

        log_service.info({"event": "game_recorded", "game_id": session.id, "events": len(history.events)})
        return history

    def get_events(self, game_id: str) -> list[GameEvent]:
        """Get the events recorded so far for a running game."""
        return list(self._events.get(game_id, []))

    def get_history(self, game_id: str) -> GameHistory | None:
        """Get completed game history."""
        return self._histories.get(game_id)

    def get_recent_histories(self, limit: int = 10) -> list[dict]:
        """Get recent game summaries."""
        histories = sorted(self._histories.values(), key=lambda h: h.ended_at, reverse=True)[:limit]
        return [h.get_summary() for h in histories]


def replay(history: GameHistory) -> GameSession:
    """Rebuild a game's final session from its recorded commands.

    Raises:
        ValueError: If the game was played with an injected random source
            and so has no seed to replay from

    """
    if history.seed is None:
        raise ValueError(f"Game {history.game_id} has no recorded seed")

    started = next(e for e in history.events if e.event_type == GameEventType.GAME_STARTED)
    players = started.data["players"]
    session = initialize_game(
        [p["id"] for p in players],
        [p["name"] for p in players],
        history.moon_phase,
        history.season,
        history.mode,
        seed=history.seed,
        settings=Settings(starting_lunar_energy=started.data["lunar_energy"]),
        game_id=history.game_id,
    )

    for event in history.commands():
        if event.event_type == GameEventType.BID_PLACED:
            session = place_bid(session, event.player_id, event.data["bid"])
        else:
            session = play_card(session, event.player_id, event.data["card_id"])
    return session


# Global event recorder instance
event_recorder = EventRecorder()
