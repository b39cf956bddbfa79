"""
Decksmith services.

The card query and relationship engine: pure functions over an
in-memory catalog. None of them perform I/O except the catalog loader.
"""

from decksmith.services.card_catalog import (
    CatalogFacets,
    find_card,
    get_catalog,
    get_facets,
    load_catalog,
    parse_catalog,
)
from decksmith.services.card_filter import filter_cards
from decksmith.services.card_sorter import compare_values, parse_number, sort_cards
from decksmith.services.deck_export import export_cards, export_deck, export_filename
from decksmith.services.deck_stats import aggregate_deck
from decksmith.services.keywords import GAME_KEYWORDS, card_keywords, extract_keywords
from decksmith.services.synergy_finder import (
    MAX_SYNERGIES,
    SynergyMatch,
    find_synergies,
    find_synergy_matches,
    format_synergy_results,
)
from decksmith.services.versions import find_versions

__all__ = [
    # Catalog
    "CatalogFacets",
    "find_card",
    "get_catalog",
    "get_facets",
    "load_catalog",
    "parse_catalog",
    # Query engine
    "filter_cards",
    "sort_cards",
    "compare_values",
    "parse_number",
    "GAME_KEYWORDS",
    "card_keywords",
    "extract_keywords",
    "MAX_SYNERGIES",
    "SynergyMatch",
    "find_synergies",
    "find_synergy_matches",
    "format_synergy_results",
    "find_versions",
    # Decks
    "aggregate_deck",
    "export_cards",
    "export_deck",
    "export_filename",
]
