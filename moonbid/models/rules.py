"""Per-mode rule records.

Every mode difference (deal sizes, round count, scoring formula, trump
choice, teams, bidding style) lives in one ``ModeRules`` record selected at
game start. The engine never branches on the mode name itself.
"""

import math
import random
from collections.abc import Callable
from dataclasses import dataclass

from moonbid.constants import (
    BID_MULTIPLIER,
    CHANNELER_FAVOR,
    COOPERATIVE_DEAL_POOL,
    EQUINOX_BALANCE_BONUS,
    EQUINOX_BASE,
    EQUINOX_STEP,
    EXACT_BID_BONUS,
    FAILED_BID_MULTIPLIER,
    MAX_HAND_SIZE,
    NEW_MOON_EXACT_BID_BONUS,
    ROLE_BONUS,
    STANDARD_DEAL_POOL,
)
from moonbid.models.enums import BiddingStyle, GameMode, MoonPhase, Role, Season, Suit
from moonbid.models.lunar import get_phase_effect, suit_for_season
from moonbid.models.player import PlayerState

ScoreFn = Callable[[PlayerState, int, MoonPhase], int]
TrumpFn = Callable[[MoonPhase, Season, random.Random], Suit | None]


def score_bid_contract(player: PlayerState, _tricks_in_round: int, moon_phase: MoonPhase) -> int:
    """Score a player against their bid.

    - Made bid: 10 per trick bid, plus 1 per overtrick
    - Missed bid: -5 per trick bid
    - Exact non-zero bid: +10 bonus, +20 under the New Moon
    """
    bid = player.bid or 0
    tricks = player.tricks

    if tricks >= bid:
        score = bid * BID_MULTIPLIER + (tricks - bid)
    else:
        score = -bid * FAILED_BID_MULTIPLIER

    if tricks == bid and bid > 0:
        score += NEW_MOON_EXACT_BID_BONUS if moon_phase == MoonPhase.NEW_MOON else EXACT_BID_BONUS

    return score


def score_balance(player: PlayerState, tricks_in_round: int, _moon_phase: MoonPhase) -> int:
    """Score a player on how close they came to half the round's tricks.

    Scores stay whole: with an odd trick count the half-point distance is
    floored (17.5 scores 17).
    """
    half = tricks_in_round / 2
    score = max(0, math.floor(EQUINOX_BASE - abs(player.tricks - half) * EQUINOX_STEP))
    if player.tricks == half:
        score += EQUINOX_BALANCE_BONUS
    return score


_ROLE_CONDITIONS: dict[Role, Callable[[PlayerState], bool]] = {
    Role.NAVIGATOR: lambda p: p.tricks == (p.bid or 0),
    Role.GUARDIAN: lambda p: p.tricks >= 1,
    Role.CHANNELER: lambda p: p.lunar_favor >= CHANNELER_FAVOR,
    Role.DIVINER: lambda p: (p.bid or 0) == 0 and p.tricks == 0,
}


def score_role(player: PlayerState, _tricks_in_round: int, _moon_phase: MoonPhase) -> int:
    """Score a cooperative player on their role's goal."""
    if player.role is None:
        return 0
    return ROLE_BONUS if _ROLE_CONDITIONS[player.role](player) else 0


def trump_from_season_or_phase(
    moon_phase: MoonPhase, season: Season, rng: random.Random
) -> Suit | None:
    """Pick the season's element suit or the phase's bonus suit at random."""
    candidates = [suit_for_season(season), get_phase_effect(moon_phase).bonus_suit]
    return rng.choice(candidates)


def no_trump(_moon_phase: MoonPhase, _season: Season, _rng: random.Random) -> Suit | None:
    """Modes played without a trump suit."""
    return None


@dataclass(frozen=True)
class ModeRules:
    """Configuration record for one game mode.

    Attributes:
        mode: Mode this record configures
        description: One-line summary
        min_players: Fewest players allowed
        max_players: Most players allowed
        rules: Rules text shown to players
        special_cards: Whether power cards are in play
        teams: Whether the players form one team (shared team score)
        bidding: How bids are collected
        deal_pool: Cards split across players (None for a fixed hand size)
        fixed_rounds: Fixed number of rounds (None to play one round per card)
        score_player: Per-player round scoring formula
        pick_trump: Trump selection policy

    """

    mode: GameMode
    description: str
    min_players: int
    max_players: int
    rules: tuple[str, ...]
    special_cards: bool
    teams: bool
    bidding: BiddingStyle
    score_player: ScoreFn
    pick_trump: TrumpFn
    deal_pool: int | None = None
    fixed_rounds: int | None = None

    def allows_player_count(self, count: int) -> bool:
        """Check a roster size against the mode's bounds."""
        return self.min_players <= count <= self.max_players

    def cards_per_player(self, num_players: int) -> int:
        """Hand size dealt at the start of every round."""
        if self.deal_pool is not None:
            return min(MAX_HAND_SIZE, self.deal_pool // num_players)
        return self.total_rounds(num_players)

    def total_rounds(self, num_players: int) -> int:
        """Number of rounds in a game."""
        if self.fixed_rounds is not None:
            return self.fixed_rounds
        return min(MAX_HAND_SIZE, STANDARD_DEAL_POOL // num_players)

    def hides_bids(self) -> bool:
        """Check if bids stay secret until everyone has bid."""
        return self.bidding == BiddingStyle.HIDDEN


GAME_MODES: dict[GameMode, ModeRules] = {
    GameMode.STANDARD: ModeRules(
        mode=GameMode.STANDARD,
        description="Classic Moon Bid gameplay with tricks and bidding",
        min_players=2,
        max_players=6,
        rules=(
            "Players bid on how many tricks they'll win",
            "Trump suit is randomly determined",
            "Must follow lead suit if possible",
            "Highest card of lead suit wins, unless trumped",
        ),
        special_cards=True,
        teams=False,
        bidding=BiddingStyle.STANDARD,
        score_player=score_bid_contract,
        pick_trump=trump_from_season_or_phase,
        deal_pool=STANDARD_DEAL_POOL,
    ),
    GameMode.COOPERATIVE: ModeRules(
        mode=GameMode.COOPERATIVE,
        description="Players work together against the moon's challenge",
        min_players=2,
        max_players=6,
        rules=(
            "Team bids on total tricks to win",
            "Moon creates phantom opponents",
            "Team must communicate strategically",
            "Lunar events occur after each trick",
        ),
        special_cards=True,
        teams=True,
        bidding=BiddingStyle.TEAM,
        score_player=score_role,
        pick_trump=no_trump,
        deal_pool=COOPERATIVE_DEAL_POOL,
        fixed_rounds=8,
    ),
    GameMode.ECLIPSE: ModeRules(
        mode=GameMode.ECLIPSE,
        description="Rare and powerful eclipse mode with high stakes",
        min_players=3,
        max_players=6,
        rules=(
            "Cards have eclipse powers when played",
            "Sun and Moon cards contend for dominance",
            "Special rewards tied to eclipse paths",
            "Bidding is hidden and revealed simultaneously",
        ),
        special_cards=True,
        teams=False,
        bidding=BiddingStyle.HIDDEN,
        score_player=score_bid_contract,
        pick_trump=no_trump,
        deal_pool=STANDARD_DEAL_POOL,
    ),
    GameMode.SOLSTICE: ModeRules(
        mode=GameMode.SOLSTICE,
        description="Longest day/night celebration with elemental powers",
        min_players=2,
        max_players=6,
        rules=(
            "Day and night cards alternate in power",
            "Elemental affinities are doubled",
            "Solstice rewards based on light/dark balance",
            "No trumps, but seasonal powers",
        ),
        special_cards=True,
        teams=False,
        bidding=BiddingStyle.STANDARD,
        score_player=score_bid_contract,
        pick_trump=no_trump,
        deal_pool=STANDARD_DEAL_POOL,
    ),
    GameMode.EQUINOX: ModeRules(
        mode=GameMode.EQUINOX,
        description="Perfect balance challenge requiring precise play",
        min_players=2,
        max_players=6,
        rules=(
            "Must win exactly half the tricks to receive rewards",
            "Balance cards between suits",
            "Equinox bonuses for symmetrical plays",
            "Penalties for imbalance",
        ),
        special_cards=True,
        teams=False,
        bidding=BiddingStyle.NONE,
        score_player=score_balance,
        pick_trump=no_trump,
        fixed_rounds=8,
    ),
    GameMode.ANCESTRAL: ModeRules(
        mode=GameMode.ANCESTRAL,
        description="Connect with witch ancestors through traditional play",
        min_players=2,
        max_players=4,
        rules=(
            "Traditional trick-taking with ancestor powers",
            "Family cards provide special abilities",
            "Heritage rewards for matching ancestral playing styles",
            "Blessings passed down for future games",
        ),
        special_cards=True,
        teams=False,
        bidding=BiddingStyle.STANDARD,
        score_player=score_bid_contract,
        pick_trump=no_trump,
        fixed_rounds=7,
    ),
}


def get_mode_rules(mode: GameMode) -> ModeRules:
    """Get the rule record for a game mode."""
    return GAME_MODES[mode]
