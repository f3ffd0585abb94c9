"""Round scoring and progression."""

import logging
from dataclasses import replace

from moonbid.constants import DOUBLED_TRICK_BONUS
from moonbid.engine.dealing import deal_round
from moonbid.engine.rewards import finalize_game
from moonbid.errors import PhaseViolation
from moonbid.models.phase import Scoring
from moonbid.models.player import PlayerState
from moonbid.models.session import GameSession

logger = logging.getLogger(__name__)


def round_score(session: GameSession, player: PlayerState) -> int:
    """Score one player for the round that just ended.

    The mode's formula, plus the player's lunar favor, plus a bonus for
    every doubled trick they won.
    """
    base = session.rules.score_player(player, len(session.completed_tricks), session.moon_phase)
    return base + player.lunar_favor + player.doubled_tricks * DOUBLED_TRICK_BONUS


def score_round(session: GameSession) -> GameSession:
    """Score the finished round, then deal the next one or end the game.

    Raises:
        PhaseViolation: If the session is not waiting to be scored

    """
    if not isinstance(session.phase, Scoring):
        raise PhaseViolation("score a round", session.phase.name)

    players = []
    for player in session.players:
        points = round_score(session, player)
        players.append(
            replace(
                player,
                score=player.score + points,
                round_scores=(*player.round_scores, points),
                round_tricks=(*player.round_tricks, player.tricks),
                round_bids=(*player.round_bids, player.bid or 0),
            )
        )
    session = replace(session, players=tuple(players))

    logger.info(
        "Round %d scored in game %s: %s",
        session.round_number,
        session.id,
        ", ".join(f"{p.id}={p.round_scores[-1]:+d}" for p in session.players),
    )

    if session.round_number < session.total_rounds:
        return deal_round(replace(session, round_number=session.round_number + 1))
    return finalize_game(session)
