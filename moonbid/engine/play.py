"""Trick engine: card play, follow-suit and trick resolution."""

import logging
from dataclasses import replace

from moonbid.engine.dealing import restore_rng
from moonbid.engine.powers import apply_power
from moonbid.engine.scoring import score_round
from moonbid.errors import (
    CardNotInHand,
    NotPlayersTurn,
    PhaseViolation,
    SuitViolation,
    UnknownPlayer,
)
from moonbid.models.card import Card
from moonbid.models.phase import Playing, Scoring
from moonbid.models.session import GameSession
from moonbid.models.trick import Trick

logger = logging.getLogger(__name__)


def legal_cards(session: GameSession, player_id: str) -> list[Card]:
    """Get the cards a player may play right now.

    Empty when it is not that player's turn or nobody is playing.

    Raises:
        UnknownPlayer: If the player is not seated

    """
    index = session.player_index(player_id)
    if index is None:
        raise UnknownPlayer(player_id)
    trick = session.current_trick
    if trick is None or index != session.current_player_index:
        return []
    return trick.get_valid_cards(session.players[index].hand)


def play_card(session: GameSession, player_id: str, card_id: str) -> GameSession:
    """Play a card from the current player's hand.

    The first card of a trick sets its lead suit. A power card takes effect
    immediately, before the next player acts. A full trick is resolved on
    the spot; the last trick of a round also scores the round and either
    deals the next one or finalizes the game.

    Raises:
        PhaseViolation: If the session is not playing
        UnknownPlayer: If the player is not seated
        NotPlayersTurn: If another player holds the turn
        CardNotInHand: If the card is not in the player's hand
        SuitViolation: If the card does not follow a lead suit the player holds

    """
    if not isinstance(session.phase, Playing):
        logger.warning("Card from %s rejected in %s phase", player_id, session.phase.name)
        raise PhaseViolation("play a card", session.phase.name)
    trick = session.phase.trick

    index = session.player_index(player_id)
    if index is None:
        raise UnknownPlayer(player_id)
    if index != session.current_player_index:
        raise NotPlayersTurn(player_id, session.current_player.id)

    player = session.players[index]
    card = player.find_card(card_id)
    if card is None:
        raise CardNotInHand(player_id, card_id)

    if (
        not trick.is_empty()
        and trick.lead_suit is not None
        and card.suit != trick.lead_suit
        and player.has_suit(trick.lead_suit)
    ):
        logger.warning("%s tried %s off suit (lead %s)", player_id, card_id, trick.lead_suit.value)
        raise SuitViolation(trick.lead_suit.value)

    logger.debug("Player %s played %s in game %s", player_id, card_id, session.id)
    session = session.with_player(player.without_card(card_id))
    trick = trick.with_play(player_id, card)

    if card.has_power():
        rng = restore_rng(session)
        session, trick, _ = apply_power(session, trick, player_id, card, rng)
        session = replace(session, rng_state=rng.getstate())

    if trick.is_complete(len(session.players)):
        return _complete_trick(session, trick)

    return replace(
        session,
        phase=Playing(trick),
        current_player_index=session.next_index(session.current_player_index),
    )


def _credit_winner(session: GameSession, trick: Trick) -> GameSession:
    """Give the trick's winner their trick, favor and card."""
    winner = session.get_player(trick.winner)
    won_cards = winner.won_cards + ((trick.winning_card,) if trick.winning_card else ())
    session = session.with_player(
        replace(
            winner,
            tricks=winner.tricks + 1,
            lunar_favor=winner.lunar_favor + 1,
            won_cards=won_cards,
            doubled_tricks=winner.doubled_tricks + (1 if trick.doubled else 0),
        )
    )
    if session.rules.teams and session.team_score is not None:
        session = replace(session, team_score=session.team_score + 1)
    return session


def _complete_trick(session: GameSession, trick: Trick) -> GameSession:
    """Resolve a full trick and move the game on."""
    resolved = trick.resolve(session.trump_suit, session.moon_phase)
    session = replace(
        session,
        completed_tricks=(*session.completed_tricks, resolved),
        trick_history=(*session.trick_history, resolved),
    )

    if resolved.winner is not None:
        session = _credit_winner(session, resolved)
        logger.info(
            "Trick %d of round %d won by %s with %s",
            len(session.completed_tricks),
            session.round_number,
            resolved.winner,
            resolved.winning_card,
        )
    else:
        logger.info(
            "Trick %d of round %d has no winner (voided=%s)",
            len(session.completed_tricks),
            session.round_number,
            resolved.voided,
        )

    if session.all_hands_empty():
        return score_round(replace(session, phase=Scoring()))

    # Winner leads; a trick nobody won is led again by its leader
    leader_id = resolved.winner or resolved.leader()
    return replace(
        session,
        phase=Playing(Trick()),
        current_player_index=session.player_index(leader_id),
    )
