from dataclasses import dataclass, fields
from typing import Any

# Cards of this faction are compatible with every other faction
NEUTRAL_FACTION = "Neutral"

# Card types hidden by the "hide special cards" filter (compared lower-cased)
SPECIAL_CARD_TYPES: frozenset[str] = frozenset({"hero", "token character", "mana", "foiler"})

# Python attribute name -> catalog (camelCase) key
_FIELD_KEYS: dict[str, str] = {
    "reference": "reference",
    "name": "name",
    "main_faction": "mainFaction",
    "rarity": "rarity",
    "card_type": "cardType",
    "card_sub_types": "cardSubTypes",
    "main_cost": "mainCost",
    "recall_cost": "recallCost",
    "ocean_power": "oceanPower",
    "forest_power": "forestPower",
    "mountain_power": "mountainPower",
    "main_effect": "mainEffect",
    "echo_effect": "echoEffect",
    "card_set": "cardSet",
    "card_set_reference": "cardSetReference",
    "image_path": "imagePath",
    "qr_url_detail": "qrUrlDetail",
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    One printed card from the catalog.

    Cards are keyed by `reference`. Several cards may share a `name`
    (reprints and alternate arts, called versions).

    Attributes:
        reference: Unique catalog key (e.g., "ALT_CORE_B_AX_01_C")
        name: Printed card name, not unique
        main_faction: Faction name, or NEUTRAL_FACTION
        rarity: Rarity name (e.g., "Common", "Rare")
        card_type: Card type (e.g., "Character", "Spell", "Hero")
        card_sub_types: Subtypes joined by ", " (e.g., "Adventurer, Engineer")
        main_cost: Hand cost, numeric string possibly prefixed with "#"
        recall_cost: Reserve cost, numeric string possibly prefixed with "#"
        ocean_power: Ocean track power; absent or "0" means no value
        forest_power: Forest track power; absent or "0" means no value
        mountain_power: Mountain track power; absent or "0" means no value
        main_effect: Main effect text
        echo_effect: Echo (support) effect text
        card_set: Set name
        card_set_reference: Set code
        image_path: Card image URL
        qr_url_detail: Public detail page URL
    """

    reference: str
    name: str
    main_faction: str | None = None
    rarity: str | None = None
    card_type: str | None = None
    card_sub_types: str | None = None
    main_cost: str | None = None
    recall_cost: str | None = None
    ocean_power: str | None = None
    forest_power: str | None = None
    mountain_power: str | None = None
    main_effect: str | None = None
    echo_effect: str | None = None
    card_set: str | None = None
    card_set_reference: str | None = None
    image_path: str | None = None
    qr_url_detail: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        """
        Build a Card from a catalog record.

        Keys are the catalog's camelCase names. Unknown keys are ignored and
        missing optional keys become None. Non-string values are stringified
        so numeric costs in hand-edited catalogs still compare correctly.
        """
        values: dict[str, str | None] = {}
        for attr, key in _FIELD_KEYS.items():
            raw = data.get(key)
            values[attr] = None if raw is None else str(raw)
        return cls(**values)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, str | None]:
        """Render the card as a camelCase catalog record."""
        return {_FIELD_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    @property
    def is_special(self) -> bool:
        """True for heroes, token characters, mana and foiler cards."""
        return (self.card_type or "").lower() in SPECIAL_CARD_TYPES
