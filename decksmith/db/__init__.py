from decksmith.db.database import get_session, init_db
from decksmith.db.operations import (
    add_card_to_deck,
    create_deck,
    deck_to_model,
    delete_deck,
    get_deck,
    list_decks,
    remove_card_from_deck,
    rename_deck,
    require_deck,
)

__all__ = [
    "add_card_to_deck",
    "create_deck",
    "deck_to_model",
    "delete_deck",
    "get_deck",
    "get_session",
    "init_db",
    "list_decks",
    "remove_card_from_deck",
    "rename_deck",
    "require_deck",
]
