"""Moon Bid game engine: pure functions from one session snapshot to the next."""

from moonbid.engine.bidding import place_bid
from moonbid.engine.game import initialize_game
from moonbid.engine.play import legal_cards, play_card
from moonbid.engine.powers import POWER_HANDLERS
from moonbid.engine.rewards import REWARD_PREDICATES, get_winners
from moonbid.engine.scoring import score_round

__all__ = [
    "POWER_HANDLERS",
    "REWARD_PREDICATES",
    "get_winners",
    "initialize_game",
    "legal_cards",
    "place_bid",
    "play_card",
    "score_round",
]
