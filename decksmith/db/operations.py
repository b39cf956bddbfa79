"""
Database CRUD operations.

Provides async functions for creating, reading, updating, and deleting
decks and their card entries.
"""

import logging
import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from decksmith.models.card import Card
from decksmith.models.db import DeckDB, DeckEntryDB
from decksmith.models.deck import Deck, DeckEntry
from decksmith.models.failure import DeckNotFoundError, FailureKind, KnownError

logger = logging.getLogger(__name__)

# --- Deck Operations ---


async def get_deck(session: AsyncSession, deck_id: str) -> DeckDB | None:
    """
    Get a deck by id with its entries loaded.

    Returns None if no deck has this id. Rows already in the session are
    refreshed, since entry quantities change through SQL statements.
    """
    result = await session.execute(
        select(DeckDB)
        .where(DeckDB.id == deck_id)
        .options(selectinload(DeckDB.entries))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def require_deck(session: AsyncSession, deck_id: str) -> DeckDB:
    """
    Get a deck by id with its entries loaded.

    Raises DeckNotFoundError if no deck has this id.
    """
    deck = await get_deck(session, deck_id)
    if deck is None:
        raise DeckNotFoundError(deck_id)
    return deck


async def list_decks(session: AsyncSession) -> list[DeckDB]:
    """Get all decks with entries loaded, oldest first."""
    result = await session.execute(
        select(DeckDB)
        .options(selectinload(DeckDB.entries))
        .order_by(DeckDB.created_at, DeckDB.name)
    )
    return list(result.scalars().all())


async def create_deck(session: AsyncSession, name: str) -> DeckDB:
    """
    Create a new, empty deck.

    Raises KnownError if the name is blank.
    """
    deck = DeckDB(id=str(uuid.uuid4()), name=_clean_name(name), entries=[])
    session.add(deck)
    await session.flush()
    logger.info("Created deck %s (%s)", deck.id, deck.name)
    return deck


async def rename_deck(session: AsyncSession, deck_id: str, name: str) -> DeckDB:
    """
    Rename a deck.

    Raises DeckNotFoundError if the deck doesn't exist, KnownError if the
    name is blank.
    """
    deck = await require_deck(session, deck_id)
    deck.name = _clean_name(name)
    await session.flush()
    return deck


async def delete_deck(session: AsyncSession, deck_id: str) -> bool:
    """
    Delete a deck and its entries.

    Returns True if deleted, False if not found.
    """
    deck = await get_deck(session, deck_id)
    if not deck:
        return False

    await session.delete(deck)
    await session.flush()
    logger.info("Deleted deck %s", deck_id)
    return True


# --- Deck Entry Operations ---

_UPSERTS = {"sqlite": sqlite_insert, "postgresql": postgresql_insert}


async def add_card_to_deck(session: AsyncSession, deck_id: str, card: Card) -> DeckDB:
    """
    Add one copy of a card to a deck.

    Increments the card's entry, or creates it with quantity 1. The
    increment runs as a single upsert in the database, so concurrent adds
    to the same deck all count.
    Raises DeckNotFoundError if the deck doesn't exist.
    """
    await require_deck(session, deck_id)

    upsert = _UPSERTS[session.get_bind().dialect.name]
    await session.execute(
        upsert(DeckEntryDB)
        .values(deck_id=deck_id, card_reference=card.reference, quantity=1, card=card.to_dict())
        .on_conflict_do_update(
            index_elements=["deck_id", "card_reference"],
            set_={"quantity": DeckEntryDB.quantity + 1},
        )
    )
    return await require_deck(session, deck_id)


async def remove_card_from_deck(session: AsyncSession, deck_id: str, reference: str) -> bool:
    """
    Remove one copy of a card from a deck.

    The entry is deleted when its quantity reaches zero. Quantities are
    changed in the database rather than on loaded rows, so concurrent
    removes don't overwrite each other.
    Raises DeckNotFoundError if the deck doesn't exist.

    Returns:
        True if a copy was removed, False if the card was not in the deck
    """
    await require_deck(session, deck_id)
    in_deck = (DeckEntryDB.deck_id == deck_id, DeckEntryDB.card_reference == reference)

    while True:
        decremented = await session.execute(
            update(DeckEntryDB)
            .where(*in_deck, DeckEntryDB.quantity > 1)
            .values(quantity=DeckEntryDB.quantity - 1)
        )
        if decremented.rowcount:
            return True

        deleted = await session.execute(
            delete(DeckEntryDB).where(*in_deck, DeckEntryDB.quantity <= 1)
        )
        if deleted.rowcount:
            return True

        # Both missed: either the card is gone, or another writer moved the
        # quantity between the two statements and we try again.
        remaining = await session.scalar(select(DeckEntryDB.id).where(*in_deck))
        if remaining is None:
            return False


def deck_to_model(db_deck: DeckDB) -> Deck:
    """Convert a database deck to a domain model."""
    return Deck(
        id=db_deck.id,
        name=db_deck.name,
        entries=[
            DeckEntry(card=Card.from_dict(entry.card), quantity=entry.quantity)
            for entry in db_deck.entries
        ],
    )


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise KnownError(
            kind=FailureKind.MISSING_REQUIRED,
            message="Please enter a name for your deck.",
        )
    return cleaned
