"""
Health check endpoints.

Liveness probe, plus a readiness probe that checks the deck store and
the card catalog.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from decksmith.db.database import get_session
from decksmith.models.failure import CatalogError
from decksmith.services.card_catalog import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str | None = None
    catalog_cards: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running. Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> HealthResponse:
    """
    Readiness probe.

    Ready when the deck store answers and the card catalog loads.
    Returns 503 otherwise.
    """
    result = HealthResponse(status="ready")

    try:
        await session.execute(text("SELECT 1"))
        result.database = "connected"
    except SQLAlchemyError:
        logger.warning("Readiness check: deck store unavailable", exc_info=True)
        result.database = "disconnected"

    try:
        result.catalog_cards = len(get_catalog())
    except (OSError, CatalogError):
        logger.warning("Readiness check: card catalog failed to load", exc_info=True)

    if result.database != "connected" or result.catalog_cards is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        result.status = "not ready"
    return result
