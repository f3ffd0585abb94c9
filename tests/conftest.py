"""Shared fixtures for Moon Bid tests."""

import random
from dataclasses import replace

import pytest

from moonbid.engine.bidding import place_bid
from moonbid.engine.game import initialize_game
from moonbid.engine.play import legal_cards, play_card
from moonbid.models.card import get_card, sort_hand
from moonbid.models.enums import GameMode, MoonPhase, Season
from moonbid.models.phase import Playing
from moonbid.models.session import GameSession
from moonbid.models.trick import Trick
from moonbid.services.event_recorder import event_recorder


@pytest.fixture(autouse=True)
def reset_event_recorder():
    """Reset the global event recorder between tests to avoid state pollution."""
    event_recorder._events.clear()
    event_recorder._game_start_times.clear()
    event_recorder._histories.clear()

    yield

    event_recorder._events.clear()
    event_recorder._game_start_times.clear()
    event_recorder._histories.clear()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def new_game():
    """Factory for freshly dealt games with players p0, p1, ..."""

    def _new_game(
        num_players: int = 3,
        mode: GameMode = GameMode.STANDARD,
        moon_phase: MoonPhase = MoonPhase.WAXING_CRESCENT,
        season: Season = Season.SPRING,
        seed: int = 42,
    ) -> GameSession:
        ids = [f"p{i}" for i in range(num_players)]
        names = [f"Witch {i}" for i in range(num_players)]
        return initialize_game(ids, names, moon_phase, season, mode, seed=seed)

    return _new_game


@pytest.fixture
def rigged(new_game):
    """Factory for sessions in the playing phase with hand-picked hands.

    Every player has already bid (0 unless ``bids`` says otherwise) and an
    empty trick is waiting for the player at ``current``.
    """

    def _rigged(
        hands: list[list[str]],
        mode: GameMode = GameMode.STANDARD,
        moon_phase: MoonPhase = MoonPhase.WAXING_CRESCENT,
        trump_suit=None,
        bids: list[int] | None = None,
        current: int = 0,
    ) -> GameSession:
        session = new_game(num_players=len(hands), mode=mode, moon_phase=moon_phase)
        players = tuple(
            replace(
                player,
                hand=sort_hand([get_card(card_id) for card_id in hand]),
                bid=bids[i] if bids else 0,
            )
            for i, (player, hand) in enumerate(zip(session.players, hands, strict=True))
        )
        return replace(
            session,
            players=players,
            phase=Playing(Trick()),
            trump_suit=trump_suit,
            current_player_index=current,
        )

    return _rigged


def random_move(session: GameSession, chooser: random.Random) -> GameSession:
    """Apply one random legal command for whoever holds the turn."""
    player = session.current_player
    if session.is_bidding():
        return place_bid(session, player.id, chooser.randint(0, len(player.hand)))
    card = chooser.choice(legal_cards(session, player.id))
    return play_card(session, player.id, card.id)


@pytest.fixture
def play_out():
    """Play random legal moves until the game is over (or a stop condition holds)."""

    def _play_out(session: GameSession, seed: int = 0, until=None) -> GameSession:
        chooser = random.Random(seed)
        while not session.is_finalized():
            if until is not None and until(session):
                break
            session = random_move(session, chooser)
        return session

    return _play_out
