"""Lunar phase, season and element tables.

These are static configuration shared with the rest of the simulation. The
engine only reads them: the bonus suit of a phase picks the suit of its
blessing card and is a trump candidate, the dominant element of a season
points at the other trump candidate, and the power maps bind each special
card to its effect.
"""

from dataclasses import dataclass

from moonbid.models.enums import Element, MoonPhase, Power, Season, Suit


@dataclass(frozen=True)
class PhaseEffect:
    """How a lunar phase colours the game."""

    description: str
    effect: str
    bonus_suit: Suit
    special_rule: str


@dataclass(frozen=True)
class SeasonEffect:
    """How a season colours the game."""

    description: str
    effect: str
    dominant_element: Element
    special_rule: str


MOON_PHASE_EFFECTS: dict[MoonPhase, PhaseEffect] = {
    MoonPhase.NEW_MOON: PhaseEffect(
        description="The New Moon shrouds cards in mystery",
        effect="Players cannot see others' cards when played until all are revealed",
        bonus_suit=Suit.POTIONS,
        special_rule="Exact bids score double points",
    ),
    MoonPhase.WAXING_CRESCENT: PhaseEffect(
        description="The Waxing Crescent brings growth",
        effect="Lowest value cards gain +3 to their value",
        bonus_suit=Suit.HERBS,
        special_rule="Winning with the lowest card awards bonus essence",
    ),
    MoonPhase.FIRST_QUARTER: PhaseEffect(
        description="The First Quarter balances light and dark",
        effect="Black and white cards (odd and even values) alternate in strength",
        bonus_suit=Suit.STARS,
        special_rule="Making exactly half your bid earns a special reward",
    ),
    MoonPhase.WAXING_GIBBOUS: PhaseEffect(
        description="The Waxing Gibbous enhances powers",
        effect="Special card abilities are empowered",
        bonus_suit=Suit.CRYSTALS,
        special_rule="Special cards count double toward your bid",
    ),
    MoonPhase.FULL_MOON: PhaseEffect(
        description="The Full Moon reveals true power",
        effect="All cards reveal their maximum potential",
        bonus_suit=Suit.STARS,
        special_rule="All rewards doubled, but penalties also doubled",
    ),
    MoonPhase.WANING_GIBBOUS: PhaseEffect(
        description="The Waning Gibbous preserves energy",
        effect="Cards played in tricks are not discarded but returned to hand once per game",
        bonus_suit=Suit.CRYSTALS,
        special_rule='Players can choose to "bank" one trick for double points',
    ),
    MoonPhase.LAST_QUARTER: PhaseEffect(
        description="The Last Quarter brings equilibrium",
        effect="Cards of equal value cancel each other out",
        bonus_suit=Suit.HERBS,
        special_rule="If all players play equal value cards, everyone gains lunar favor",
    ),
    MoonPhase.WANING_CRESCENT: PhaseEffect(
        description="The Waning Crescent inspires reflection",
        effect="Players can see one card from each opponent's hand",
        bonus_suit=Suit.POTIONS,
        special_rule="Intentionally losing a trick with a high card grants lunar favor",
    ),
}

SEASON_EFFECTS: dict[Season, SeasonEffect] = {
    Season.SPRING: SeasonEffect(
        description="Spring brings new growth and beginnings",
        effect="Herb suit gains +2 power",
        dominant_element=Element.EARTH,
        special_rule="First trick winner gets a bonus wildcard",
    ),
    Season.SUMMER: SeasonEffect(
        description="Summer burns with magical intensity",
        effect="Potion suit can override trump",
        dominant_element=Element.FIRE,
        special_rule="Playing three cards of the same value creates a solar flare bonus",
    ),
    Season.FALL: SeasonEffect(
        description="Fall bestows unexpected changes",
        effect="Trump suit rotates after each trick",
        dominant_element=Element.AIR,
        special_rule="Successful bids of exactly 3 receive a special harvest reward",
    ),
    Season.WINTER: SeasonEffect(
        description="Winter brings quiet reflection and power",
        effect="Crystal suit cards can freeze an opponent's card for one trick",
        dominant_element=Element.WATER,
        special_rule="Lowest bidder gets a protective frost shield against bid failure",
    ),
}

PHASE_POWER: dict[MoonPhase, Power] = {
    MoonPhase.NEW_MOON: Power.NULLIFY,
    MoonPhase.WAXING_CRESCENT: Power.PREDICT,
    MoonPhase.FIRST_QUARTER: Power.SWAP,
    MoonPhase.WAXING_GIBBOUS: Power.ILLUMINATE,
    MoonPhase.FULL_MOON: Power.DOUBLE,
    MoonPhase.WANING_GIBBOUS: Power.PROTECT,
    MoonPhase.LAST_QUARTER: Power.TRANSFORM,
    MoonPhase.WANING_CRESCENT: Power.REVEAL,
}

ELEMENT_POWER: dict[Element, Power] = {
    Element.EARTH: Power.PROTECT,
    Element.WATER: Power.TRANSFORM,
    Element.FIRE: Power.DOUBLE,
    Element.AIR: Power.SWAP,
    Element.SPIRIT: Power.ILLUMINATE,
}

ELEMENT_SUIT: dict[Element, Suit] = {
    Element.EARTH: Suit.HERBS,
    Element.WATER: Suit.POTIONS,
    Element.FIRE: Suit.STARS,
    Element.AIR: Suit.STARS,
    Element.SPIRIT: Suit.CRYSTALS,
}

POWER_DESCRIPTIONS: dict[Power, str] = {
    Power.NULLIFY: "Cancels another card's effect or value",
    Power.DOUBLE: "Doubles the value of another played card",
    Power.STEAL: "Takes a trick that would have been won by another player",
    Power.PREDICT: "Look at the top 3 cards before they're dealt",
    Power.SWAP: "Exchange a card in your hand with a random card from another player",
    Power.ILLUMINATE: "Reveals all cards in play with enhanced effects",
    Power.DUPLICATE: "Copy another card's power or value",
    Power.TRANSFORM: "Change a card's suit to match the current trump",
    Power.PROTECT: "Prevents a card from being affected by special powers",
    Power.REVEAL: "Forces one player to reveal their hand",
}


def get_phase_effect(moon_phase: MoonPhase) -> PhaseEffect:
    """Get the effect table entry for a lunar phase."""
    return MOON_PHASE_EFFECTS[moon_phase]


def suit_for_season(season: Season) -> Suit:
    """Get the suit tied to a season's dominant element."""
    return ELEMENT_SUIT[SEASON_EFFECTS[season].dominant_element]
