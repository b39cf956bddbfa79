"""
Deck and search result export.

Renders decks and card lists as JSON documents users can save or share.
"""

import json
import re
from collections.abc import Iterable
from typing import Any

from decksmith.models.card import Card
from decksmith.models.deck import Deck


def export_deck(deck: Deck) -> dict[str, Any]:
    """
    Build the export document for a deck.

    Returns:
        {"name": ..., "cards": [{"name", "reference", "quantity"}, ...]}
        with cards in deck order
    """
    return {
        "name": deck.name,
        "cards": [
            {
                "name": entry.card.name,
                "reference": entry.reference,
                "quantity": entry.quantity,
            }
            for entry in deck.entries
        ],
    }


def export_filename(deck: Deck) -> str:
    """File name for a deck export, e.g. "My Axiom Deck" -> "My_Axiom_Deck_deck.json"."""
    base_name = re.sub(r"\s+", "_", deck.name)
    return f"{base_name}_deck.json"


def export_cards(cards: Iterable[Card]) -> str:
    """Render cards as a JSON array of catalog records."""
    return json.dumps([card.to_dict() for card in cards], indent=2, ensure_ascii=False)
