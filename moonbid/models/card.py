"""Card model and catalog."""

from dataclasses import dataclass, replace

from moonbid.constants import (
    CATALOG_SIZE,
    ELEMENT_CARD_RANK,
    PHASE_CARD_RANK,
    RANKS_PER_SUIT,
    SPECIAL_RANK_THRESHOLD,
    SPECIAL_VALUE_BONUS,
)
from moonbid.models.enums import Element, MoonPhase, Power, Season, Suit
from moonbid.models.lunar import (
    ELEMENT_POWER,
    ELEMENT_SUIT,
    MOON_PHASE_EFFECTS,
    PHASE_POWER,
    POWER_DESCRIPTIONS,
)

# Face names by rank; other ranks are named by their number
RANK_NAMES: dict[int, str] = {
    1: "Ace",
    11: "Seer",
    12: "Alchemist",
    13: "Archmage",
}


@dataclass(frozen=True)
class Card:
    """Represents a card in Moon Bid.

    Attributes:
        id: Unique card identifier (e.g. ``card_stars_7``)
        suit: One of the four suits
        rank: Card rank (1-13)
        name: Display name
        description: Rules text
        power: Power triggered when the card is played, if any
        moon_affinity: Lunar phase the card is bound to, if any
        element_affinity: Element the card is bound to, if any
        season_affinity: Season the card is bound to, if any
        is_special: True for ranks above 10 and for every power card

    """

    id: str
    suit: Suit
    rank: int
    name: str
    description: str = ""
    power: Power | None = None
    moon_affinity: MoonPhase | None = None
    element_affinity: Element | None = None
    season_affinity: Season | None = None
    is_special: bool = False

    @property
    def effective_value(self) -> int:
        """Value used to compare cards inside a trick."""
        if self.is_special:
            return self.rank + SPECIAL_VALUE_BONUS
        return self.rank

    def has_power(self) -> bool:
        """Check if card triggers a power when played."""
        return self.power is not None

    def with_suit(self, suit: Suit) -> "Card":
        """Return a copy of this card moved to another suit."""
        return replace(self, suit=suit)

    def __str__(self) -> str:
        """Return string representation of card."""
        return self.name


def _slug(label: str) -> str:
    return label.lower().replace(" ", "_")


def make_suit_card(suit: Suit, rank: int) -> Card:
    """Build a plain suit card."""
    name = f"{RANK_NAMES.get(rank, str(rank))} of {suit.value.title()}"
    return Card(
        id=f"card_{suit.value}_{rank}",
        suit=suit,
        rank=rank,
        name=name,
        description=f"{name}, value {rank}",
        is_special=rank > SPECIAL_RANK_THRESHOLD,
    )


def make_phase_card(moon_phase: MoonPhase) -> Card:
    """Build the blessing card of a lunar phase."""
    power = PHASE_POWER[moon_phase]
    return Card(
        id=f"special_{_slug(moon_phase.value)}",
        suit=MOON_PHASE_EFFECTS[moon_phase].bonus_suit,
        rank=PHASE_CARD_RANK,
        name=f"{moon_phase.value} Blessing",
        description=(
            f"Special card aligned with the {moon_phase.value}. {POWER_DESCRIPTIONS[power]}"
        ),
        power=power,
        moon_affinity=moon_phase,
        is_special=True,
    )


def make_element_card(element: Element) -> Card:
    """Build the embodiment card of an element."""
    power = ELEMENT_POWER[element]
    return Card(
        id=f"special_{_slug(element.value)}",
        suit=ELEMENT_SUIT[element],
        rank=ELEMENT_CARD_RANK,
        name=f"{element.value} Embodiment",
        description=(
            f"Elemental card embodying the power of {element.value}. {POWER_DESCRIPTIONS[power]}"
        ),
        power=power,
        element_affinity=element,
        is_special=True,
    )


def build_catalog() -> list[Card]:
    """Build the full card set (65 cards), in a fixed order.

    Four suits of ranks 1-13, then one blessing card per lunar phase, then
    one embodiment card per element.
    """
    catalog = [make_suit_card(suit, rank) for suit in Suit for rank in range(1, RANKS_PER_SUIT + 1)]
    catalog.extend(make_phase_card(moon_phase) for moon_phase in MoonPhase)
    catalog.extend(make_element_card(element) for element in Element)
    return catalog


# Static lookup by id (the catalog never changes)
_CARDS: dict[str, Card] = {card.id: card for card in build_catalog()}

if len(_CARDS) != CATALOG_SIZE:
    raise RuntimeError(f"Catalog has {len(_CARDS)} unique cards, expected {CATALOG_SIZE}")


def get_card(card_id: str) -> Card:
    """Get catalog card by ID."""
    return _CARDS[card_id]


def get_all_cards() -> dict[str, Card]:
    """Get all cards in the catalog."""
    return _CARDS.copy()


def sort_hand(cards: list[Card]) -> tuple[Card, ...]:
    """Order a hand by suit name, then rank."""
    return tuple(sorted(cards, key=lambda c: (c.suit.value, c.rank, c.id)))
