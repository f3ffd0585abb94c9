"""Random source handling and per-round dealing."""

import logging
import os
import random
from dataclasses import replace

from moonbid.errors import RandomnessUnavailable
from moonbid.models.deck import Deck
from moonbid.models.phase import Bidding
from moonbid.models.session import GameSession

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> tuple[random.Random, int]:
    """Create a seeded random source.

    Without a seed one is drawn from the operating system. If the OS
    cannot provide one, no deck can ever be shuffled, so this raises
    ``RandomnessUnavailable``.
    """
    if seed is None:
        try:
            seed = int.from_bytes(os.urandom(8), "big")
        except NotImplementedError as exc:
            raise RandomnessUnavailable("No OS randomness source available") from exc
    return random.Random(seed), seed


def restore_rng(session: GameSession) -> random.Random:
    """Rebuild the session's random source at its saved state."""
    if session.rng_state is None:
        raise RandomnessUnavailable(f"Game {session.id} has no random source state")
    rng = random.Random()
    rng.setstate(session.rng_state)
    return rng


def deal_round(session: GameSession) -> GameSession:
    """Start the session's current round.

    Rebuilds and reshuffles the full catalog, clears every player's
    per-round state, deals fresh hands and opens bidding.
    """
    rng = restore_rng(session)
    rules = session.rules
    num_players = len(session.players)

    deck = Deck(rng)
    deck.shuffle()
    hands = deck.deal(num_players, rules.cards_per_player(num_players))

    players = tuple(
        player.reset_round().with_hand(list(hand))
        for player, hand in zip(session.players, hands, strict=True)
    )

    logger.info(
        "Starting round %d/%d in game %s (%d cards each)",
        session.round_number,
        session.total_rounds,
        session.id,
        len(hands[0]) if hands else 0,
    )

    return replace(
        session,
        players=players,
        phase=Bidding(),
        current_player_index=session.round_starter_index,
        draw_pile=deck.remaining(),
        completed_tricks=(),
        rng_state=rng.getstate(),
    )
