"""
Card API endpoints.

Provides catalog search, filter values, and card inspection
(synergies and versions).
"""

from collections.abc import Sequence
from dataclasses import fields
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from decksmith.models.card import Card
from decksmith.models.failure import CardNotFoundError
from decksmith.models.query import CardQuery, SortSpec
from decksmith.services.card_catalog import find_card, get_catalog, get_facets
from decksmith.services.card_filter import filter_cards
from decksmith.services.card_sorter import sort_cards
from decksmith.services.deck_export import export_cards
from decksmith.services.synergy_finder import find_synergy_matches
from decksmith.services.versions import find_versions

router = APIRouter(prefix="/cards", tags=["cards"])

Catalog = Annotated[Sequence[Card], Depends(get_catalog)]


class CardResponse(BaseModel):
    """A card record, serialized with the catalog's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reference: str
    name: str
    main_faction: str | None = None
    rarity: str | None = None
    card_type: str | None = None
    card_sub_types: str | None = None
    main_cost: str | None = None
    recall_cost: str | None = None
    ocean_power: str | None = None
    forest_power: str | None = None
    mountain_power: str | None = None
    main_effect: str | None = None
    echo_effect: str | None = None
    card_set: str | None = None
    card_set_reference: str | None = None
    image_path: str | None = None
    qr_url_detail: str | None = None

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(**{f.name: getattr(card, f.name) for f in fields(card)})


class CardListResponse(BaseModel):
    """Response model for a list of cards."""

    cards: list[CardResponse]
    count: int


class FacetsResponse(BaseModel):
    """Distinct filter values found in the catalog."""

    factions: list[str] = Field(default_factory=list)
    rarities: list[str] = Field(default_factory=list)
    card_types: list[str] = Field(default_factory=list)
    card_sets: list[str] = Field(default_factory=list)


class SynergyResponse(BaseModel):
    """A related card and why it was suggested."""

    card: CardResponse
    reason: str


class CardInspectionResponse(BaseModel):
    """Response model for cards related to a focus card."""

    card: CardResponse
    synergies: list[SynergyResponse] = Field(default_factory=list)


class VersionsResponse(BaseModel):
    """Response model for other prints of a card."""

    card: CardResponse
    versions: list[CardResponse] = Field(default_factory=list)
    count: int = 0


def _search(
    catalog: Sequence[Card],
    q: str | None,
    faction: str | None,
    rarity: str | None,
    card_type: str | None,
    card_set: str | None,
    hide_special: bool,
    order_by: str,
    order: str,
) -> list[Card]:
    """Filter then sort the catalog; raises InvalidSortFieldError for a bad sort."""
    spec = SortSpec.parse(order_by, order)
    query = CardQuery(
        text=q,
        faction=faction,
        rarity=rarity,
        card_type=card_type,
        card_set=card_set,
        hide_special_cards=hide_special,
    )
    return sort_cards(filter_cards(catalog, query), spec)


@router.get("", response_model=CardListResponse)
async def search_cards(
    catalog: Catalog,
    q: Annotated[str | None, Query(description="Text in name or effects")] = None,
    faction: str | None = None,
    rarity: str | None = None,
    card_type: str | None = None,
    card_set: str | None = None,
    hide_special: Annotated[
        bool, Query(description="Hide heroes, token characters, mana and foilers")
    ] = True,
    order_by: str = "name",
    order: str = "asc",
) -> CardListResponse:
    """
    Search the catalog.

    All filters are ANDed together; "all" disables a filter.
    Returns 400 if order_by is not an allowed sort field.
    """
    cards = _search(
        catalog, q, faction, rarity, card_type, card_set, hide_special, order_by, order
    )
    return CardListResponse(cards=[CardResponse.from_card(c) for c in cards], count=len(cards))


@router.get("/facets", response_model=FacetsResponse)
async def get_card_facets(catalog: Catalog) -> FacetsResponse:
    """Get the values available for each filter."""
    facets = get_facets(catalog)
    return FacetsResponse(
        factions=facets.factions,
        rarities=facets.rarities,
        card_types=facets.card_types,
        card_sets=facets.card_sets,
    )


@router.get("/export")
async def export_search_results(
    catalog: Catalog,
    q: str | None = None,
    faction: str | None = None,
    rarity: str | None = None,
    card_type: str | None = None,
    card_set: str | None = None,
    hide_special: bool = True,
    order_by: str = "name",
    order: str = "asc",
) -> Response:
    """Export a search result as a JSON array of catalog records."""
    cards = _search(
        catalog, q, faction, rarity, card_type, card_set, hide_special, order_by, order
    )
    return Response(content=export_cards(cards), media_type="application/json")


@router.get("/{reference}", response_model=CardResponse)
async def get_card(reference: str, catalog: Catalog) -> CardResponse:
    """
    Get a card by reference.

    Returns 404 if card not found.
    """
    return CardResponse.from_card(_require_card(catalog, reference))


@router.get("/{reference}/synergies", response_model=CardInspectionResponse)
async def get_card_synergies(reference: str, catalog: Catalog) -> CardInspectionResponse:
    """
    Get up to 12 cards that synergize with a card.

    Returns 404 if card not found.
    """
    card = _require_card(catalog, reference)
    matches = find_synergy_matches(card, catalog)

    return CardInspectionResponse(
        card=CardResponse.from_card(card),
        synergies=[
            SynergyResponse(card=CardResponse.from_card(m.card), reason=m.reason) for m in matches
        ],
    )


@router.get("/{reference}/versions", response_model=VersionsResponse)
async def get_card_versions(reference: str, catalog: Catalog) -> VersionsResponse:
    """
    Get the other prints of a card.

    Returns 404 if card not found.
    """
    card = _require_card(catalog, reference)
    versions = find_versions(card, catalog)

    return VersionsResponse(
        card=CardResponse.from_card(card),
        versions=[CardResponse.from_card(v) for v in versions],
        count=len(versions),
    )


def _require_card(catalog: Sequence[Card], reference: str) -> Card:
    card = find_card(catalog, reference)
    if card is None:
        raise CardNotFoundError(reference)
    return card
