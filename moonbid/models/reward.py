"""Reward catalog.

Rewards are offered at game start and granted at finalization. Whether a
player earns one is decided by the predicate registered for its
``required_outcome`` text (see ``moonbid.engine.rewards``).
"""

from dataclasses import dataclass

from moonbid.models.enums import GameMode, MoonPhase, Rarity, RewardType, Season


class Outcome:
    """Required outcome texts used by the reward catalog."""

    WIN_THREE_TRICKS = "Win at least 3 tricks"
    EXACT_BID = "Make your exact bid"
    WIN_WITH_LOWEST = "Win a trick with the lowest card"
    WIN_FIVE_TRICKS = "Win at least 5 tricks"
    INCREASING_TRICKS = "Increase your tricks won each round"
    WIN_PLAYING_LAST = "Win a trick by playing a card after seeing all others"
    HALF_BID = "Win exactly half your bid"
    FIRST_TRICK = "Be the first to win a trick"
    THREE_IN_A_ROW = "Win 3 tricks in a row"
    BID_THREE = "Make a bid of exactly 3 and succeed"
    LOWEST_BIDDER_WINS = "Win a trick when you bid the lowest"
    EVERYONE_SCORES = "Complete the game with all players winning at least 1 trick"
    SUN_AND_MOON = "Win a trick with both sun and moon cards"


@dataclass(frozen=True)
class Reward:
    """A reward a player can earn during a game.

    Attributes:
        id: Unique reward identifier
        name: Display name
        description: Flavour text
        type: Kind of item granted
        required_outcome: Outcome text keying the predicate
        quantity: Amount granted
        rarity: Rarity tier
        moon_phase_bonus: Phase under which the quantity is doubled, if any

    """

    id: str
    name: str
    description: str
    type: RewardType
    required_outcome: str
    quantity: int
    rarity: Rarity
    moon_phase_bonus: MoonPhase | None = None


@dataclass(frozen=True)
class GrantedReward:
    """A reward earned by a player at the end of a game."""

    player_id: str
    reward_id: str
    name: str
    type: RewardType
    quantity: int


BASE_REWARDS: tuple[Reward, ...] = (
    Reward(
        id="reward_mana",
        name="Lunar Mana",
        description="Pure magical energy from the moon phases",
        type=RewardType.MANA,
        required_outcome=Outcome.WIN_THREE_TRICKS,
        quantity=25,
        rarity=Rarity.COMMON,
        moon_phase_bonus=MoonPhase.FULL_MOON,
    ),
    Reward(
        id="reward_essence",
        name="Crystallized Essence",
        description="Refined lunar power for advanced crafting",
        type=RewardType.ESSENCE,
        required_outcome=Outcome.EXACT_BID,
        quantity=3,
        rarity=Rarity.UNCOMMON,
    ),
)

_NEW_MOON_REWARD = Reward(
    id="reward_new_moon",
    name="Void Essence",
    description="Mysterious energy from the darkest night",
    type=RewardType.ESSENCE,
    required_outcome=Outcome.WIN_WITH_LOWEST,
    quantity=2,
    rarity=Rarity.RARE,
)

_FULL_MOON_REWARD = Reward(
    id="reward_full_moon",
    name="Moonlight Crystal",
    description="Captures the full power of moonlight",
    type=RewardType.INGREDIENT,
    required_outcome=Outcome.WIN_FIVE_TRICKS,
    quantity=1,
    rarity=Rarity.RARE,
    moon_phase_bonus=MoonPhase.FULL_MOON,
)

_WAXING_REWARD = Reward(
    id="reward_waxing_moon",
    name="Growth Charm",
    description="Accelerates growth of plants and projects",
    type=RewardType.RECIPE,
    required_outcome=Outcome.INCREASING_TRICKS,
    quantity=1,
    rarity=Rarity.UNCOMMON,
)

_WANING_REWARD = Reward(
    id="reward_waning_moon",
    name="Reflection Mirror",
    description="Shows hidden qualities in ingredients",
    type=RewardType.INGREDIENT,
    required_outcome=Outcome.WIN_PLAYING_LAST,
    quantity=1,
    rarity=Rarity.UNCOMMON,
)

_QUARTER_REWARD = Reward(
    id="reward_quarter_moon",
    name="Balance Stone",
    description="Helps maintain equilibrium in potions",
    type=RewardType.INGREDIENT,
    required_outcome=Outcome.HALF_BID,
    quantity=1,
    rarity=Rarity.UNCOMMON,
)

PHASE_REWARDS: dict[MoonPhase, Reward] = {
    MoonPhase.NEW_MOON: _NEW_MOON_REWARD,
    MoonPhase.FULL_MOON: _FULL_MOON_REWARD,
    MoonPhase.WAXING_CRESCENT: _WAXING_REWARD,
    MoonPhase.WAXING_GIBBOUS: _WAXING_REWARD,
    MoonPhase.WANING_CRESCENT: _WANING_REWARD,
    MoonPhase.WANING_GIBBOUS: _WANING_REWARD,
    MoonPhase.FIRST_QUARTER: _QUARTER_REWARD,
    MoonPhase.LAST_QUARTER: _QUARTER_REWARD,
}

SEASON_REWARDS: dict[Season, Reward] = {
    Season.SPRING: Reward(
        id="reward_spring",
        name="Renewal Essence",
        description="Captures the energy of new beginnings",
        type=RewardType.ESSENCE,
        required_outcome=Outcome.FIRST_TRICK,
        quantity=3,
        rarity=Rarity.UNCOMMON,
    ),
    Season.SUMMER: Reward(
        id="reward_summer",
        name="Sun-Touched Packaging",
        description="Elegant packaging that enhances fire-aligned products",
        type=RewardType.PACKAGING,
        required_outcome=Outcome.THREE_IN_A_ROW,
        quantity=1,
        rarity=Rarity.RARE,
    ),
    Season.FALL: Reward(
        id="reward_fall",
        name="Harvest Bonus",
        description="Additional yield from your next garden harvest",
        type=RewardType.GOLD,
        required_outcome=Outcome.BID_THREE,
        quantity=75,
        rarity=Rarity.UNCOMMON,
    ),
    Season.WINTER: Reward(
        id="reward_winter",
        name="Frost Essence",
        description="Preserves ingredients with winter's chill",
        type=RewardType.ESSENCE,
        required_outcome=Outcome.LOWEST_BIDDER_WINS,
        quantity=2,
        rarity=Rarity.UNCOMMON,
    ),
}

MODE_REWARDS: dict[GameMode, Reward] = {
    GameMode.COOPERATIVE: Reward(
        id="reward_team_spirit",
        name="Coven Harmony",
        description="Strengthens bonds between witches",
        type=RewardType.REPUTATION,
        required_outcome=Outcome.EVERYONE_SCORES,
        quantity=20,
        rarity=Rarity.RARE,
    ),
    GameMode.ECLIPSE: Reward(
        id="reward_eclipse_seed",
        name="Eclipse-Touched Seed",
        description="A rare seed infused with eclipse energy",
        type=RewardType.SEED,
        required_outcome=Outcome.SUN_AND_MOON,
        quantity=1,
        rarity=Rarity.LEGENDARY,
    ),
}


def create_game_rewards(moon_phase: MoonPhase, season: Season, mode: GameMode) -> tuple[Reward, ...]:
    """Build the rewards on offer for a game."""
    rewards = [*BASE_REWARDS, PHASE_REWARDS[moon_phase], SEASON_REWARDS[season]]
    if mode in MODE_REWARDS:
        rewards.append(MODE_REWARDS[mode])
    return tuple(rewards)
