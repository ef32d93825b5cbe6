"""Shared pytest fixtures for all test suites."""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from backend.app.db.engine import get_engine, get_session
from backend.app.db.models import Base
from backend.app.db.seed_dev import seed_dev
from backend.app.main import app
from backend.app.models.catalog import Catalog, Destination, Hotel, Vehicle, VehicleType
from backend.app.models.common import PriceCategory


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """File-backed sqlite engine with all tables created.

    A file is used instead of :memory: so every pooled connection sees the
    same database.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=NullPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_engine(sqlite_engine: AsyncEngine) -> AsyncEngine:
    """sqlite engine holding the dev profile and sample catalog."""
    await seed_dev(sqlite_engine)
    return sqlite_engine


@pytest_asyncio.fixture
async def session(sqlite_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on the test database."""
    async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
        yield session


def override_database(engine: AsyncEngine) -> None:
    """Point the app's engine and session dependencies at ``engine``."""

    async def _engine() -> AsyncEngine:
        return engine

    async def _session() -> AsyncGenerator[AsyncSession, None]:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_engine] = _engine
    app.dependency_overrides[get_session] = _session


@pytest_asyncio.fixture
async def api_client(seeded_engine: AsyncEngine) -> AsyncGenerator[httpx.AsyncClient, None]:
    """API client backed by the seeded sqlite database."""
    override_database(seeded_engine)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def kandy_catalog() -> Catalog:
    """One Luxury hotel in Kandy at 100/night and one Car at 0.50/km."""
    return Catalog(
        hotels=(
            Hotel(
                hotel_id="h-kandy",
                hotel_name="Kandy Palace",
                stars=5,
                per_night_charge=100.0,
                price_category=PriceCategory.luxury,
                city="Kandy",
            ),
        ),
        vehicles=(
            Vehicle(vehicle_id="v-car", vehicle_type="Car", model="Toyota Prius", per_km_charge=0.5),
        ),
        destinations=(
            Destination(
                destination_id="d-tooth",
                interest_category="Culture",
                name="Temple of the Tooth",
                description="Sacred relic temple",
                city="Kandy",
            ),
        ),
        vehicle_types=(VehicleType(name="Car", min_passengers=1, max_passengers=4),),
    )
