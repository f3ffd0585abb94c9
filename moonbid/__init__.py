"""Moon Bid: rules engine for the lunar trick-taking bidding card game."""

from moonbid.engine import get_winners, initialize_game, legal_cards, place_bid, play_card, score_round
from moonbid.errors import (
    CardNotInHand,
    ErrorCode,
    InvalidBid,
    InvalidPlayerCount,
    MoonBidError,
    NotPlayersTurn,
    PhaseViolation,
    RandomnessUnavailable,
    SuitViolation,
    UnknownPlayer,
)

__version__ = "0.1.0"

__all__ = [
    "CardNotInHand",
    "ErrorCode",
    "InvalidBid",
    "InvalidPlayerCount",
    "MoonBidError",
    "NotPlayersTurn",
    "PhaseViolation",
    "RandomnessUnavailable",
    "SuitViolation",
    "UnknownPlayer",
    "get_winners",
    "initialize_game",
    "legal_cards",
    "place_bid",
    "play_card",
    "score_round",
]
