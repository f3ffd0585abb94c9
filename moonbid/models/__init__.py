"""Game domain models."""

from moonbid.models.card import Card, build_catalog, get_card
from moonbid.models.deck import Deck
from moonbid.models.enums import GameMode, MoonPhase, Power, Role, Season, Suit
from moonbid.models.phase import Bidding, Finalized, GameOutcome, Playing, Scoring, WinnerReport
from moonbid.models.player import PlayerState
from moonbid.models.reward import GrantedReward, Reward
from moonbid.models.rules import GAME_MODES, ModeRules
from moonbid.models.session import GameSession
from moonbid.models.trick import PlayedCard, Trick

__all__ = [
    "GAME_MODES",
    "Bidding",
    "Card",
    "Deck",
    "Finalized",
    "GameMode",
    "GameOutcome",
    "GameSession",
    "GrantedReward",
    "ModeRules",
    "MoonPhase",
    "PlayedCard",
    "PlayerState",
    "Playing",
    "Power",
    "Reward",
    "Role",
    "Scoring",
    "Season",
    "Suit",
    "Trick",
    "WinnerReport",
    "build_catalog",
    "get_card",
]
