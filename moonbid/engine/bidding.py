"""Bidding controller."""

import logging
from dataclasses import replace

from moonbid.errors import InvalidBid, PhaseViolation, UnknownPlayer
from moonbid.models.phase import Bidding, Playing
from moonbid.models.session import GameSession
from moonbid.models.trick import Trick

logger = logging.getLogger(__name__)


def place_bid(session: GameSession, player_id: str, amount: int) -> GameSession:
    """Record a player's bid.

    Bids are accepted from any seated player in any order, and a player may
    replace their own bid while bidding is open. Each accepted bid that
    leaves someone still to bid moves the turn on by one seat. The bid that
    completes the table opens play with an empty trick, led by whoever holds
    the turn at that point.

    Raises:
        PhaseViolation: If the session is not bidding
        UnknownPlayer: If the player is not seated
        InvalidBid: If the amount is not an integer in ``[0, hand size]``

    """
    if not isinstance(session.phase, Bidding):
        logger.warning("Bid from %s rejected in %s phase", player_id, session.phase.name)
        raise PhaseViolation("place a bid", session.phase.name)

    player = session.get_player(player_id)
    if player is None:
        raise UnknownPlayer(player_id)

    max_bid = len(player.hand)
    if isinstance(amount, bool) or not isinstance(amount, int):
        logger.warning("Bid %r from %s rejected (not a whole number)", amount, player_id)
        raise InvalidBid(amount, max_bid)
    if not 0 <= amount <= max_bid:
        logger.warning("Bid %d from %s rejected (max %d)", amount, player_id, max_bid)
        raise InvalidBid(amount, max_bid)

    session = session.with_player(replace(player, bid=amount))
    logger.info("Player %s bid %d in game %s", player_id, amount, session.id)

    if all(p.made_bid() for p in session.players):
        logger.info("Bidding complete for round %d in game %s", session.round_number, session.id)
        return replace(session, phase=Playing(Trick()))

    return replace(session, current_player_index=session.next_index(session.current_player_index))
