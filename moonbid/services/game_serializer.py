"""Game serialization.

Converts session snapshots into plain dictionaries for the surrounding
application, either in full or as seen by one player.
"""

from typing import Any

from moonbid.models.card import Card
from moonbid.models.phase import Bidding, Finalized, GamePhase, Playing, Scoring
from moonbid.models.player import PlayerState
from moonbid.models.reward import GrantedReward
from moonbid.models.session import GameSession
from moonbid.models.trick import Trick


def serialize_card(card: Card) -> dict[str, Any]:
    """Serialize a Card to a dictionary."""
    return {
        "id": card.id,
        "suit": card.suit.value,
        "rank": card.rank,
        "name": card.name,
        "description": card.description,
        "power": card.power.value if card.power else None,
        "moon_affinity": card.moon_affinity.value if card.moon_affinity else None,
        "element_affinity": card.element_affinity.value if card.element_affinity else None,
        "season_affinity": card.season_affinity.value if card.season_affinity else None,
        "is_special": card.is_special,
    }


def serialize_player(player: PlayerState) -> dict[str, Any]:
    """Serialize a PlayerState to a dictionary."""
    return {
        "id": player.id,
        "name": player.name,
        "hand": [serialize_card(c) for c in player.hand],
        "bid": player.bid,
        "tricks": player.tricks,
        "score": player.score,
        "lunar_favor": player.lunar_favor,
        "power_used": player.power_used,
        "won_cards": [c.id for c in player.won_cards],
        "role": player.role.value if player.role else None,
        "doubled_tricks": player.doubled_tricks,
        "round_scores": list(player.round_scores),
        "round_tricks": list(player.round_tricks),
        "round_bids": list(player.round_bids),
        "insights": list(player.insights),
    }


def serialize_trick(trick: Trick) -> dict[str, Any]:
    """Serialize a Trick to a dictionary."""
    return {
        "lead_suit": trick.lead_suit.value if trick.lead_suit else None,
        "plays": [
            {"player_id": p.player_id, "card": serialize_card(p.card)} for p in trick.plays
        ],
        "winner": trick.winner,
        "winning_card_id": trick.winning_card.id if trick.winning_card else None,
        "doubled": trick.doubled,
        "voided": trick.voided,
        "protected": trick.protected,
        "stolen_by": trick.stolen_by,
    }


def serialize_granted_reward(granted: GrantedReward) -> dict[str, Any]:
    """Serialize a GrantedReward to a dictionary."""
    return {
        "player_id": granted.player_id,
        "reward_id": granted.reward_id,
        "name": granted.name,
        "type": granted.type.value,
        "quantity": granted.quantity,
    }


def serialize_phase(phase: GamePhase) -> dict[str, Any]:
    """Serialize a phase, with the data only that phase carries."""
    match phase:
        case Bidding() | Scoring():
            return {"name": phase.name}
        case Playing(trick=trick):
            return {"name": phase.name, "trick": serialize_trick(trick)}
        case Finalized(outcome=outcome):
            return {
                "name": phase.name,
                "winner_ids": list(outcome.winners.winner_ids),
                "winner_names": list(outcome.winners.winner_names),
                "scores": list(outcome.winners.scores),
                "is_team_win": outcome.winners.is_team_win,
                "winning_condition_met": outcome.winning_condition_met,
                "rewards": [serialize_granted_reward(r) for r in outcome.rewards],
            }
    raise TypeError(f"Unknown phase: {phase!r}")


def serialize_session(session: GameSession) -> dict[str, Any]:
    """Serialize a complete session to a dictionary.

    Args:
        session: Session snapshot to serialize

    Returns:
        JSON-ready dictionary

    """
    return {
        "id": session.id,
        "mode": session.mode.value,
        "moon_phase": session.moon_phase.value,
        "season": session.season.value,
        "phase": serialize_phase(session.phase),
        "players": [serialize_player(p) for p in session.players],
        "current_player_index": session.current_player_index,
        "round_number": session.round_number,
        "total_rounds": session.total_rounds,
        "draw_pile_size": len(session.draw_pile),
        "completed_tricks": [serialize_trick(t) for t in session.completed_tricks],
        "trick_history": [serialize_trick(t) for t in session.trick_history],
        "trump_suit": session.trump_suit.value if session.trump_suit else None,
        "phase_bonus": {
            "description": session.phase_bonus.description,
            "effect": session.phase_bonus.effect,
            "bonus_suit": session.phase_bonus.bonus_suit.value
            if session.phase_bonus.bonus_suit
            else None,
        }
        if session.phase_bonus
        else None,
        "rewards": [
            {
                "id": r.id,
                "name": r.name,
                "type": r.type.value,
                "required_outcome": r.required_outcome,
                "quantity": r.quantity,
                "rarity": r.rarity.value,
            }
            for r in session.rewards
        ],
        "lunar_energy": session.lunar_energy,
        "team_score": session.team_score,
    }


def player_view(session: GameSession, viewer_id: str) -> dict[str, Any]:
    """Serialize the session as one player may see it.

    Opponents' hands are replaced by their size, and in hidden-bidding modes
    opponents' bids stay secret until everyone has bid.
    """
    data = serialize_session(session)
    hide_bids = session.rules.hides_bids() and session.is_bidding()

    for player_data in data["players"]:
        if player_data["id"] == viewer_id:
            continue
        player_data["hand_size"] = len(player_data["hand"])
        player_data["hand"] = []
        player_data["insights"] = []
        if hide_bids:
            player_data["bid"] = None
            player_data["has_bid"] = session.get_player(player_data["id"]).made_bid()

    return data
