"""Power effect processor.

Each power maps to one handler in ``POWER_HANDLERS``. A handler receives
the session (with the card already out of the player's hand), the trick
(with the card already appended) and the random source, and returns the
updated session and trick.

A player's first power of a round takes effect; later ones are ignored,
except under the Full Moon when every power card takes effect.
"""

import logging
import random
from collections.abc import Callable
from dataclasses import replace

from moonbid.constants import ILLUMINATE_ENERGY, PREDICT_PEEK
from moonbid.models.card import Card
from moonbid.models.enums import MoonPhase, Power
from moonbid.models.player import PlayerState
from moonbid.models.session import GameSession
from moonbid.models.trick import Trick

logger = logging.getLogger(__name__)

PowerHandler = Callable[[GameSession, Trick, str, random.Random], tuple[GameSession, Trick]]


def _with_insights(player: PlayerState, card_ids: list[str]) -> PlayerState:
    known = list(player.insights)
    known.extend(card_id for card_id in card_ids if card_id not in known)
    return replace(player, insights=tuple(known))


def _nullify(
    session: GameSession, trick: Trick, _player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Void the trick: nobody wins it, unless it is protected."""
    if trick.protected:
        return session, trick
    return session, replace(trick, voided=True)


def _double(
    session: GameSession, trick: Trick, _player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Double the trick; its winner scores a bonus at round end."""
    return session, replace(trick, doubled=True)


def _steal(
    session: GameSession, trick: Trick, player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Take the trick if anyone wins it."""
    return session, replace(trick, stolen_by=player_id)


def _predict(
    session: GameSession, trick: Trick, player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Show the player the top cards of the draw pile."""
    player = session.get_player(player_id)
    peek = [card.id for card in session.draw_pile[:PREDICT_PEEK]]
    return session.with_player(_with_insights(player, peek)), trick


def _swap(
    session: GameSession, trick: Trick, player_id: str, rng: random.Random
) -> tuple[GameSession, Trick]:
    """Trade a random card with a random opponent who still holds cards."""
    player = session.get_player(player_id)
    opponents = [p for p in session.players if p.id != player_id and p.hand]
    if not player.hand or not opponents:
        return session, trick

    opponent = rng.choice(opponents)
    given: Card = rng.choice(player.hand)
    taken: Card = rng.choice(opponent.hand)

    player_hand = [c for c in player.hand if c.id != given.id] + [taken]
    opponent_hand = [c for c in opponent.hand if c.id != taken.id] + [given]
    session = session.with_player(player.with_hand(player_hand))
    session = session.with_player(opponent.with_hand(opponent_hand))
    logger.debug("%s swapped %s for %s's %s", player_id, given.id, opponent.id, taken.id)
    return session, trick


def _illuminate(
    session: GameSession, trick: Trick, _player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Grant every player lunar favor and charge the shared pool."""
    players = tuple(replace(p, lunar_favor=p.lunar_favor + 1) for p in session.players)
    return replace(
        session, players=players, lunar_energy=session.lunar_energy + ILLUMINATE_ENERGY
    ), trick


def _duplicate(
    session: GameSession, trick: Trick, player_id: str, rng: random.Random
) -> tuple[GameSession, Trick]:
    """Copy the most recent earlier power in this trick."""
    for played in reversed(trick.plays[:-1]):
        power = played.card.power
        if power is not None and power != Power.DUPLICATE:
            return POWER_HANDLERS[power](session, trick, player_id, rng)
    return session, trick


def _transform(
    session: GameSession, trick: Trick, _player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Move the card just played into the trump suit."""
    if session.trump_suit is None or not trick.plays:
        return session, trick
    card = trick.plays[-1].card
    return session, trick.with_last_card(card.with_suit(session.trump_suit))


def _protect(
    session: GameSession, trick: Trick, _player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Shield the trick from a later nullify."""
    return session, replace(trick, protected=True)


def _reveal(
    session: GameSession, trick: Trick, player_id: str, _rng: random.Random
) -> tuple[GameSession, Trick]:
    """Show the player the next player's hand."""
    index = session.player_index(player_id)
    target = session.players[session.next_index(index)]
    if target.id == player_id:
        return session, trick
    player = session.get_player(player_id)
    return session.with_player(_with_insights(player, [c.id for c in target.hand])), trick


POWER_HANDLERS: dict[Power, PowerHandler] = {
    Power.NULLIFY: _nullify,
    Power.DOUBLE: _double,
    Power.STEAL: _steal,
    Power.PREDICT: _predict,
    Power.SWAP: _swap,
    Power.ILLUMINATE: _illuminate,
    Power.DUPLICATE: _duplicate,
    Power.TRANSFORM: _transform,
    Power.PROTECT: _protect,
    Power.REVEAL: _reveal,
}

_missing = set(Power) - set(POWER_HANDLERS)
if _missing:
    raise RuntimeError(f"Powers without a handler: {sorted(p.value for p in _missing)}")


def can_use_power(session: GameSession, player: PlayerState) -> bool:
    """Check if a player's power card would take effect now."""
    if not session.rules.special_cards:
        return False
    if session.moon_phase == MoonPhase.FULL_MOON:
        return True
    return not player.power_used


def apply_power(
    session: GameSession, trick: Trick, player_id: str, card: Card, rng: random.Random
) -> tuple[GameSession, Trick, bool]:
    """Apply the power of a card that was just played.

    Returns:
        Updated session, updated trick, and whether the power took effect

    """
    if card.power is None:
        return session, trick, False

    player = session.get_player(player_id)
    if not can_use_power(session, player):
        logger.debug("Power %s of %s ignored (already used this round)", card.power.value, player_id)
        return session, trick, False

    session = session.with_player(replace(player, power_used=True))
    session, trick = POWER_HANDLERS[card.power](session, trick, player_id, rng)
    logger.info("Player %s used %s in game %s", player_id, card.power.value, session.id)
    return session, trick, True
