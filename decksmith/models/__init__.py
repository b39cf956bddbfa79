from decksmith.models.card import NEUTRAL_FACTION, SPECIAL_CARD_TYPES, Card
from decksmith.models.deck import Deck, DeckEntry, DeckStats
from decksmith.models.failure import (
    ApiResponse,
    CardNotFoundError,
    CatalogError,
    DeckNotFoundError,
    FailureDetail,
    FailureKind,
    InvalidSortFieldError,
    KnownError,
    OutcomeType,
)
from decksmith.models.query import ALL, CardQuery, SortField, SortOrder, SortSpec

__all__ = [
    "ALL",
    "ApiResponse",
    "Card",
    "CardNotFoundError",
    "CardQuery",
    "CatalogError",
    "Deck",
    "DeckEntry",
    "DeckNotFoundError",
    "DeckStats",
    "FailureDetail",
    "FailureKind",
    "InvalidSortFieldError",
    "KnownError",
    "NEUTRAL_FACTION",
    "OutcomeType",
    "SPECIAL_CARD_TYPES",
    "SortField",
    "SortOrder",
    "SortSpec",
]
