from dataclasses import dataclass
from enum import Enum

from decksmith.models.failure import InvalidSortFieldError

# Filter value meaning "no restriction" (same as unset)
ALL = "all"


@dataclass
class CardQuery:
    """
    A catalog search built from the user's current filters.

    Attributes:
        text: Free text matched against name, main effect and echo effect
        faction: Exact main faction, or None / "all"
        rarity: Exact rarity, or None / "all"
        card_type: Exact card type, or None / "all"
        card_set: Exact set name, or None / "all"
        hide_special_cards: Exclude heroes, token characters, mana and foilers
    """

    text: str | None = None
    faction: str | None = None
    rarity: str | None = None
    card_type: str | None = None
    card_set: str | None = None
    hide_special_cards: bool = False


class SortField(str, Enum):
    """Fields cards can be ordered by."""

    NAME = "name"
    RARITY = "rarity"
    MAIN_COST = "mainCost"
    RECALL_COST = "recallCost"
    OCEAN_POWER = "oceanPower"
    FOREST_POWER = "forestPower"
    MOUNTAIN_POWER = "mountainPower"

    @property
    def attribute(self) -> str:
        """Card attribute holding this field's value."""
        return _SORT_ATTRIBUTES[self]


_SORT_ATTRIBUTES: dict[SortField, str] = {
    SortField.NAME: "name",
    SortField.RARITY: "rarity",
    SortField.MAIN_COST: "main_cost",
    SortField.RECALL_COST: "recall_cost",
    SortField.OCEAN_POWER: "ocean_power",
    SortField.FOREST_POWER: "forest_power",
    SortField.MOUNTAIN_POWER: "mountain_power",
}


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortSpec:
    """Which field to order by and in which direction."""

    field: SortField = SortField.NAME
    order: SortOrder = SortOrder.ASC

    @classmethod
    def parse(cls, field: str, order: str = "asc") -> "SortSpec":
        """
        Build a SortSpec from raw strings.

        Raises:
            InvalidSortFieldError: If field or order is not an allowed value
        """
        try:
            sort_field = SortField(field)
        except ValueError:
            raise InvalidSortFieldError(field, [f.value for f in SortField]) from None
        try:
            sort_order = SortOrder(order.lower())
        except ValueError:
            raise InvalidSortFieldError(order, [o.value for o in SortOrder]) from None
        return cls(field=sort_field, order=sort_order)
