"""Integration tests for dev seeding."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.app.db.models import Hotel, Profile, UserRole
from backend.app.db.seed_dev import DEV_USER_ID, HOTELS, seed_dev


@pytest.mark.asyncio
async def test_seed_dev_is_idempotent(sqlite_engine: AsyncEngine) -> None:
    await seed_dev(sqlite_engine)
    await seed_dev(sqlite_engine)

    async with AsyncSession(sqlite_engine) as session:
        hotels = await session.scalar(select(func.count()).select_from(Hotel))
        roles = await session.scalars(select(UserRole.role).where(UserRole.user_id == DEV_USER_ID))
        profile = await session.get(Profile, DEV_USER_ID)

    assert hotels == len(HOTELS)
    assert set(roles) == {"admin", "driver", "hotel_owner", "user"}
    assert profile is not None
    assert profile.email == "dev@example.com"
