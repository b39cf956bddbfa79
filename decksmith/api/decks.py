"""
Deck API endpoints.

Provides deck lifecycle (create, rename, delete), adding and removing
cards, deck statistics and deck export.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from decksmith.api.cards import CardResponse, Catalog
from decksmith.db import (
    add_card_to_deck,
    create_deck,
    deck_to_model,
    delete_deck,
    list_decks,
    remove_card_from_deck,
    rename_deck,
    require_deck,
)
from decksmith.db.database import get_session
from decksmith.models.deck import Deck
from decksmith.models.failure import CardNotFoundError, DeckNotFoundError
from decksmith.services.card_catalog import find_card
from decksmith.services.deck_export import export_deck, export_filename
from decksmith.services.deck_stats import aggregate_deck

router = APIRouter(prefix="/decks", tags=["decks"])

Session = Annotated[AsyncSession, Depends(get_session)]


class DeckEntryResponse(BaseModel):
    """A card in a deck with its quantity."""

    card: CardResponse
    quantity: int


class DeckResponse(BaseModel):
    """Response model for a single deck."""

    id: str
    name: str
    cards: list[DeckEntryResponse] = Field(default_factory=list)
    total_cards: int = 0
    unique_cards: int = 0

    @classmethod
    def from_deck(cls, deck: Deck) -> "DeckResponse":
        return cls(
            id=deck.id,
            name=deck.name,
            cards=[
                DeckEntryResponse(card=CardResponse.from_card(e.card), quantity=e.quantity)
                for e in deck.entries
            ],
            total_cards=deck.total_cards(),
            unique_cards=deck.unique_cards(),
        )


class DeckListResponse(BaseModel):
    """Response model for a list of decks."""

    decks: list[DeckResponse]
    count: int


class DeckCreateRequest(BaseModel):
    """Request model for creating or renaming a deck."""

    name: str = Field(
        ...,
        description="Deck name",
        examples=["Axiom Midrange"],
    )


class AddCardRequest(BaseModel):
    """Request model for adding one copy of a card to a deck."""

    reference: str = Field(
        ...,
        description="Catalog reference of the card",
        examples=["ALT_CORE_B_AX_04_C"],
    )


class DeckStatsResponse(BaseModel):
    """Card counts of a deck by faction, type and rarity."""

    deck_id: str
    total: int = 0
    factions: dict[str, int] = Field(default_factory=dict)
    types: dict[str, int] = Field(default_factory=dict)
    rarities: dict[str, int] = Field(default_factory=dict)


class DeleteResponse(BaseModel):
    """Response model for delete operations."""

    deck_id: str
    deleted: bool


@router.get("", response_model=DeckListResponse)
async def get_decks(session: Session) -> DeckListResponse:
    """List all decks."""
    db_decks = await list_decks(session)
    decks = [DeckResponse.from_deck(deck_to_model(d)) for d in db_decks]
    return DeckListResponse(decks=decks, count=len(decks))


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
async def post_deck(request: DeckCreateRequest, session: Session) -> DeckResponse:
    """
    Create an empty deck.

    Returns 400 if the name is blank.
    """
    db_deck = await create_deck(session, request.name)
    return DeckResponse.from_deck(deck_to_model(db_deck))


@router.get("/{deck_id}", response_model=DeckResponse)
async def get_deck_by_id(deck_id: str, session: Session) -> DeckResponse:
    """
    Get a deck.

    Returns 404 if deck not found.
    """
    db_deck = await require_deck(session, deck_id)
    return DeckResponse.from_deck(deck_to_model(db_deck))


@router.patch("/{deck_id}", response_model=DeckResponse)
async def patch_deck(deck_id: str, request: DeckCreateRequest, session: Session) -> DeckResponse:
    """
    Rename a deck.

    Returns 404 if deck not found, 400 if the name is blank.
    """
    db_deck = await rename_deck(session, deck_id, request.name)
    return DeckResponse.from_deck(deck_to_model(db_deck))


@router.delete("/{deck_id}", response_model=DeleteResponse)
async def remove_deck(deck_id: str, session: Session) -> DeleteResponse:
    """
    Delete a deck.

    Returns 404 if deck not found.
    """
    if not await delete_deck(session, deck_id):
        raise DeckNotFoundError(deck_id)
    return DeleteResponse(deck_id=deck_id, deleted=True)


@router.post("/{deck_id}/cards", response_model=DeckResponse)
async def post_deck_card(
    deck_id: str,
    request: AddCardRequest,
    session: Session,
    catalog: Catalog,
) -> DeckResponse:
    """
    Add one copy of a catalog card to a deck.

    Returns 404 if the deck or the card is not found.
    """
    card = find_card(catalog, request.reference)
    if card is None:
        raise CardNotFoundError(request.reference)

    db_deck = await add_card_to_deck(session, deck_id, card)
    return DeckResponse.from_deck(deck_to_model(db_deck))


@router.delete("/{deck_id}/cards/{reference}", response_model=DeckResponse)
async def delete_deck_card(deck_id: str, reference: str, session: Session) -> DeckResponse:
    """
    Remove one copy of a card from a deck.

    Removing a card that is not in the deck leaves the deck unchanged.
    Returns 404 if deck not found.
    """
    await remove_card_from_deck(session, deck_id, reference)
    db_deck = await require_deck(session, deck_id)
    return DeckResponse.from_deck(deck_to_model(db_deck))


@router.get("/{deck_id}/stats", response_model=DeckStatsResponse)
async def get_deck_stats(deck_id: str, session: Session) -> DeckStatsResponse:
    """
    Get faction, type and rarity counts for a deck.

    Returns 404 if deck not found.
    """
    db_deck = await require_deck(session, deck_id)
    stats = aggregate_deck(deck_to_model(db_deck))

    return DeckStatsResponse(
        deck_id=deck_id,
        total=stats.total,
        factions=stats.factions,
        types=stats.types,
        rarities=stats.rarities,
    )


@router.get("/{deck_id}/export")
async def get_deck_export(deck_id: str, session: Session) -> JSONResponse:
    """
    Download a deck as a JSON file.

    Returns 404 if deck not found.
    """
    deck = deck_to_model(await require_deck(session, deck_id))

    return JSONResponse(
        content=export_deck(deck),
        headers={"Content-Disposition": f'attachment; filename="{export_filename(deck)}"'},
    )
