"""Game constants for Moon Bid."""

# Catalog
RANKS_PER_SUIT = 13
SPECIAL_RANK_THRESHOLD = 10  # Cards ranked above this are special
SPECIAL_VALUE_BONUS = 10  # Added to a special card's rank when comparing
PHASE_CARD_RANK = 13
ELEMENT_CARD_RANK = 12
CATALOG_SIZE = 65

# Deal
STANDARD_DEAL_POOL = 52
COOPERATIVE_DEAL_POOL = 60
MAX_HAND_SIZE = 13

# Scoring (formulas in moonbid/models/rules.py)
BID_MULTIPLIER = 10
FAILED_BID_MULTIPLIER = 5
EXACT_BID_BONUS = 10
NEW_MOON_EXACT_BID_BONUS = 20
EQUINOX_BASE = 20
EQUINOX_STEP = 5
EQUINOX_BALANCE_BONUS = 20
ROLE_BONUS = 15
CHANNELER_FAVOR = 3
DOUBLED_TRICK_BONUS = 5

# Powers
ILLUMINATE_ENERGY = 5
PREDICT_PEEK = 3

# Cooperative win threshold per player
TEAM_SCORE_PER_PLAYER = 3
