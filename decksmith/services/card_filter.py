"""
Card catalog filtering.

Narrows the catalog to the cards matching a CardQuery.

Supports queries like:
- "Which cards mention 'sabotage'?" -> text="sabotage"
- "Show me rare Axiom characters" -> faction="Axiom", rarity="Rare", card_type="Character"
- "Everything from the core set, no heroes or tokens" -> card_set="Beyond the Gates",
  hide_special_cards=True
"""

from collections.abc import Iterable

from decksmith.models.card import Card
from decksmith.models.query import ALL, CardQuery


def filter_cards(catalog: Iterable[Card], query: CardQuery) -> list[Card]:
    """
    Return the cards matching every active filter of a query.

    All filters are ANDed together. Input order is preserved and
    neither the catalog nor its cards are modified.

    Args:
        catalog: Cards to search
        query: Active filters; unset or "all" values impose no restriction

    Returns:
        New list of matching cards
    """
    term = query.text.lower() if query.text else ""

    results: list[Card] = []
    for card in catalog:
        # Apply text filter over name and both effects
        if term and not _matches_text(card, term):
            continue

        if not _matches_value(card.main_faction, query.faction):
            continue

        if not _matches_value(card.rarity, query.rarity):
            continue

        if not _matches_value(card.card_type, query.card_type):
            continue

        if not _matches_value(card.card_set, query.card_set):
            continue

        if query.hide_special_cards and card.is_special:
            continue

        results.append(card)

    return results


def _matches_text(card: Card, term: str) -> bool:
    """Case-insensitive substring match on name, main effect or echo effect."""
    return (
        term in card.name.lower()
        or term in (card.main_effect or "").lower()
        or term in (card.echo_effect or "").lower()
    )


def _matches_value(value: str | None, wanted: str | None) -> bool:
    """Exact equality, with None, "" and "all" matching anything."""
    if not wanted or wanted == ALL:
        return True
    return value == wanted
