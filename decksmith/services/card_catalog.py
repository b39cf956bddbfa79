"""
Card catalog service.

Loads the card catalog from a JSON file and caches it. The catalog is a
JSON array of card records using the catalog's camelCase keys.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from decksmith.config import settings
from decksmith.models.card import Card
from decksmith.models.failure import CatalogError

logger = logging.getLogger(__name__)


@dataclass
class CatalogFacets:
    """Distinct filter values present in a catalog, in first-seen order."""

    factions: list[str] = field(default_factory=list)
    rarities: list[str] = field(default_factory=list)
    card_types: list[str] = field(default_factory=list)
    card_sets: list[str] = field(default_factory=list)


def load_catalog(path: Path) -> list[Card]:
    """
    Load the card catalog from file.

    Args:
        path: Path to a JSON array of card records

    Returns:
        Cards in file order.

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        CatalogError: If the file is not an array of records, a record has
            no reference or name, or a reference appears twice
    """
    if not path.exists():
        raise FileNotFoundError(f"Card catalog not found at {path}.")

    with open(path, encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError("Card catalog is not valid JSON.", detail=str(e)) from e

    if not isinstance(records, list):
        raise CatalogError("Card catalog must be a JSON array of cards.", detail=str(path))

    cards = parse_catalog(records)
    logger.info("Loaded %d cards from %s", len(cards), path)
    return cards


def parse_catalog(records: list[dict]) -> list[Card]:
    """
    Build cards from catalog records.

    Raises:
        CatalogError: If a record has no reference or name, or a reference repeats
    """
    cards: list[Card] = []
    seen: set[str] = set()

    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise CatalogError("Card record must be an object.", detail=f"Record {position}")
        reference = record.get("reference")
        if not reference or not record.get("name"):
            raise CatalogError(
                "Card record is missing a reference or name.",
                detail=f"Record {position}: {reference or '<no reference>'}",
            )
        if reference in seen:
            raise CatalogError("Duplicate card reference in catalog.", detail=str(reference))
        seen.add(reference)
        cards.append(Card.from_dict(record))

    return cards


@lru_cache(maxsize=1)
def get_catalog() -> tuple[Card, ...]:
    """
    Get the cached catalog from the configured path.

    Returns a tuple so callers cannot modify the shared catalog.
    Cached after first load.
    """
    return tuple(load_catalog(Path(settings.catalog_path)))


def get_facets(catalog: Iterable[Card]) -> CatalogFacets:
    """Collect the distinct factions, rarities, card types and sets of a catalog."""
    facets = CatalogFacets()
    for card in catalog:
        _append_distinct(facets.factions, card.main_faction)
        _append_distinct(facets.rarities, card.rarity)
        _append_distinct(facets.card_types, card.card_type)
        _append_distinct(facets.card_sets, card.card_set)
    return facets


def _append_distinct(values: list[str], value: str | None) -> None:
    if value and value not in values:
        values.append(value)


def find_card(catalog: Iterable[Card], reference: str) -> Card | None:
    """Find a card by reference."""
    for card in catalog:
        if card.reference == reference:
            return card
    return None
