from dataclasses import dataclass, field

from decksmith.models.card import Card


@dataclass
class DeckEntry:
    """A card in a deck with how many copies are included."""

    card: Card
    quantity: int = 1

    @property
    def reference(self) -> str:
        return self.card.reference


@dataclass
class Deck:
    """
    A user-built, named collection of cards.

    Entries keep the order cards were first added. There is at most one
    entry per card reference, and every entry has quantity >= 1.

    Attributes:
        id: Opaque deck identifier
        name: Display name
        entries: Cards in the deck with quantities
    """

    id: str
    name: str
    entries: list[DeckEntry] = field(default_factory=list)

    def get_entry(self, reference: str) -> DeckEntry | None:
        """Get the entry for a card reference, if present."""
        for entry in self.entries:
            if entry.reference == reference:
                return entry
        return None

    def get_quantity(self, reference: str) -> int:
        """Copies of a card in the deck (0 if absent)."""
        entry = self.get_entry(reference)
        return entry.quantity if entry else 0

    def add_card(self, card: Card) -> DeckEntry:
        """Add one copy of a card, creating its entry if needed."""
        entry = self.get_entry(card.reference)
        if entry is None:
            entry = DeckEntry(card=card, quantity=1)
            self.entries.append(entry)
        else:
            entry.quantity += 1
        return entry

    def remove_card(self, reference: str) -> bool:
        """
        Remove one copy of a card.

        The entry is dropped when its quantity reaches zero.

        Returns:
            True if a copy was removed, False if the card was not in the deck
        """
        entry = self.get_entry(reference)
        if entry is None:
            return False
        if entry.quantity > 1:
            entry.quantity -= 1
        else:
            self.entries.remove(entry)
        return True

    def total_cards(self) -> int:
        """Total number of cards in the deck."""
        return sum(entry.quantity for entry in self.entries)

    def unique_cards(self) -> int:
        """Number of distinct cards in the deck."""
        return len(self.entries)


@dataclass
class DeckStats:
    """
    Card counts of a deck broken down by faction, type and rarity.

    Each count is the sum of quantities of matching entries.
    """

    total: int = 0
    factions: dict[str, int] = field(default_factory=dict)
    types: dict[str, int] = field(default_factory=dict)
    rarities: dict[str, int] = field(default_factory=dict)

    def percentage(self, count: int) -> float:
        """Share of the deck a count represents (0.0 for an empty deck)."""
        if self.total == 0:
            return 0.0
        return (count / self.total) * 100
