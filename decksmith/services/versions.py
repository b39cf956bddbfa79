"""Grouping of card versions (prints sharing a name)."""

from collections.abc import Iterable

from decksmith.models.card import Card


def find_versions(focus: Card, catalog: Iterable[Card]) -> list[Card]:
    """
    Find the other prints of a card.

    Args:
        focus: Card being inspected
        catalog: All cards

    Returns:
        Cards with the same name and a different reference, in catalog order
    """
    return [
        card for card in catalog if card.name == focus.name and card.reference != focus.reference
    ]
