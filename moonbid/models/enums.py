"""Enums and constants for the game."""

from enum import Enum


class Suit(str, Enum):
    """Card suits in Moon Bid."""

    STARS = "stars"
    HERBS = "herbs"
    POTIONS = "potions"
    CRYSTALS = "crystals"


class Power(str, Enum):
    """Special card powers."""

    NULLIFY = "nullify"
    DOUBLE = "double"
    STEAL = "steal"
    PREDICT = "predict"
    SWAP = "swap"
    ILLUMINATE = "illuminate"
    DUPLICATE = "duplicate"
    TRANSFORM = "transform"
    PROTECT = "protect"
    REVEAL = "reveal"


class GameMode(str, Enum):
    """Game modes, each with its own rule record."""

    STANDARD = "standard"
    COOPERATIVE = "cooperative"
    ECLIPSE = "eclipse"
    SOLSTICE = "solstice"
    EQUINOX = "equinox"
    ANCESTRAL = "ancestral"


class BiddingStyle(str, Enum):
    """How bids are collected in a mode."""

    STANDARD = "standard"
    HIDDEN = "hidden"
    TEAM = "team"
    NONE = "none"


class MoonPhase(str, Enum):
    """Lunar phases, in calendar order."""

    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"


class Season(str, Enum):
    """Seasons of the simulation calendar."""

    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"


class Element(str, Enum):
    """Elements bound to the elemental special cards."""

    EARTH = "Earth"
    WATER = "Water"
    FIRE = "Fire"
    AIR = "Air"
    SPIRIT = "Spirit"


class Role(str, Enum):
    """Cooperative mode roles, assigned round-robin by seat."""

    NAVIGATOR = "Navigator"
    GUARDIAN = "Guardian"
    CHANNELER = "Channeler"
    DIVINER = "Diviner"


class RewardType(str, Enum):
    """Kinds of items a reward grants."""

    MANA = "mana"
    ESSENCE = "essence"
    INGREDIENT = "ingredient"
    RECIPE = "recipe"
    REPUTATION = "reputation"
    GOLD = "gold"
    PACKAGING = "packaging"
    SEED = "seed"


class Rarity(str, Enum):
    """Reward rarity."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"
