from contextlib import asynccontextmanager
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from decksmith.db.database import enable_sqlite_foreign_keys, get_session
from decksmith.main import app
from decksmith.models.card import Card
from decksmith.models.db import Base
from decksmith.services.card_catalog import get_catalog


@asynccontextmanager
async def _deck_store(url: str):
    engine = create_async_engine(url, echo=False)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@asynccontextmanager
async def _test_client(engine: AsyncEngine, catalog: list[Card]):
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_catalog] = lambda: tuple(catalog)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    async with _deck_store("sqlite+aiosqlite:///:memory:") as engine:
        yield engine


@pytest.fixture
async def file_engine(tmp_path: Path):
    """Create a file-backed SQLite engine, so separate connections share one database."""
    async with _deck_store(f"sqlite+aiosqlite:///{tmp_path / 'decks.db'}") as engine:
        yield engine


@pytest.fixture
async def client(async_engine, sample_catalog: list[Card]):
    """Provide an async test client backed by the sample catalog and a test database."""
    async with _test_client(async_engine, sample_catalog) as client:
        yield client


@pytest.fixture
async def file_client(file_engine, sample_catalog: list[Card]):
    """Provide a test client whose requests each get their own database connection."""
    async with _test_client(file_engine, sample_catalog) as client:
        yield client


@pytest.fixture
def sample_catalog() -> list[Card]:
    """Small catalog covering every faction filter, special types and reprints."""
    return [
        Card(
            reference="ALT_CORE_B_AX_01_C",
            name="Sierra & Oddball",
            main_faction="Axiom",
            rarity="Common",
            card_type="Hero",
            main_effect="When you play a Permanent, put the top card of your deck in Mana.",
            card_set="Beyond the Gates",
        ),
        Card(
            reference="ALT_CORE_B_AX_04_C",
            name="Vaike, the Engineer",
            main_faction="Axiom",
            rarity="Common",
            card_type="Character",
            card_sub_types="Adventurer, Engineer",
            main_cost="#3",
            recall_cost="#2",
            ocean_power="1",
            forest_power="2",
            mountain_power="0",
            main_effect="Create a Brassbug token.",
            echo_effect="Draw a card.",
            card_set="Beyond the Gates",
        ),
        Card(
            reference="ALT_CORE_B_AX_04_R1",
            name="Vaike, the Engineer",
            main_faction="Axiom",
            rarity="Rare",
            card_type="Character",
            card_sub_types="Adventurer, Engineer",
            main_cost="#3",
            recall_cost="#2",
            ocean_power="2",
            forest_power="2",
            mountain_power="0",
            main_effect="Create two Brassbug tokens.",
            echo_effect="Draw a card.",
            card_set="Beyond the Gates",
        ),
        Card(
            reference="ALT_CORE_B_AX_08_C",
            name="Brassbug",
            main_faction="Axiom",
            rarity="Common",
            card_type="Token Character",
            card_sub_types="Robot",
            ocean_power="2",
            forest_power="2",
            mountain_power="2",
            card_set="Beyond the Gates",
        ),
        Card(
            reference="ALT_CORE_B_AX_12_C",
            name="Tinker Workshop",
            main_faction="Axiom",
            rarity="Common",
            card_type="Spell",
            main_cost="#2",
            recall_cost="#2",
            main_effect="Vaike, the Engineer gains 1 boost.",
            card_set="Beyond the Gates",
        ),
        Card(
            reference="ALT_CORE_B_BR_10_C",
            name="Mountain Brawler",
            main_faction="Bravos",
            rarity="Common",
            card_type="Character",
            card_sub_types="Soldier",
            main_cost="#10",
            recall_cost="#1",
            ocean_power="0",
            forest_power="1",
            mountain_power="3",
            main_effect="When I join the Expedition, I deal damage to a target Character.",
            card_set="Beyond the Gates",
        ),
        Card(
            reference="ALT_ALIZE_B_LY_05_R1",
            name="Frost Singer",
            main_faction="Lyra",
            rarity="Rare",
            card_type="Character",
            card_sub_types="Bard",
            main_cost="#0",
            recall_cost="#1",
            ocean_power="3",
            echo_effect="Sabotage a Character.",
            card_set="Trial by Frost",
        ),
        Card(
            reference="ALT_CORE_B_NE_1_C",
            name="Mana Orb",
            main_faction="Neutral",
            rarity="Common",
            card_type="Mana",
            card_set="Beyond the Gates",
        ),
    ]
