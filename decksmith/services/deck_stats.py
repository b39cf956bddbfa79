"""
Deck statistics.

Breaks a deck's cards down by faction, card type and rarity.
"""

from decksmith.models.deck import Deck, DeckStats

# Bucket for entries whose card lacks the attribute
UNKNOWN_BUCKET = "Unknown"


def aggregate_deck(deck: Deck) -> DeckStats:
    """
    Compute card counts for a deck.

    Every count is a sum of entry quantities, so a deck holding 2 copies
    of one Axiom card and 3 of another has factions == {"Axiom": 5}.
    An empty deck yields total 0 and empty breakdowns.
    """
    stats = DeckStats()

    for entry in deck.entries:
        card = entry.card
        stats.total += entry.quantity
        _add(stats.factions, card.main_faction, entry.quantity)
        _add(stats.types, card.card_type, entry.quantity)
        _add(stats.rarities, card.rarity, entry.quantity)

    return stats


def _add(counts: dict[str, int], key: str | None, quantity: int) -> None:
    bucket = key or UNKNOWN_BUCKET
    counts[bucket] = counts.get(bucket, 0) + quantity
