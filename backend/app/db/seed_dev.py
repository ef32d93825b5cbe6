"""Dev seeding helper - dev profile, roles and a small Sri Lankan catalog."""

import asyncio
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.app.db.engine import get_async_engine
from backend.app.db.models import (
    Destination,
    Hotel,
    Profile,
    UserRole,
    Vehicle,
    VehicleClass,
    VehicleType,
)

# Fixed ID matching stub auth in backend/app/api/auth.py
DEV_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")
DEV_EMAIL = "dev@example.com"

VEHICLE_TYPES = [("Car", 1, 4), ("Van", 5, 10), ("Bus", 11, 40)]

VEHICLE_CLASSES = [
    ("Car", "Mid", 1.0),
    ("Car", "Luxury", 1.5),
    ("Van", "Mid", 1.0),
    ("Van", "Luxury", 1.4),
    ("Bus", "Mid", 1.0),
    ("Bus", "Luxury", 1.3),
]

HOTELS = [
    ("Kandy Hills Guest House", 2, 6500.0, "Low", "Kandy"),
    ("Temple View Hotel", 4, 18000.0, "Middle", "Kandy"),
    ("Galle Fort Residence", 3, 15000.0, "Middle", "Galle"),
    ("Unawatuna Beach Resort", 5, 42000.0, "Luxury", "Galle"),
    ("Ella Rock Lodge", 3, 9000.0, "Low", "Ella"),
    ("Yala Safari Camp", 4, 35000.0, "Luxury", "Tissamaharama"),
    ("Colombo City Hotel", 4, 21000.0, "Middle", "Colombo"),
]

VEHICLES = [
    ("Car", "Toyota Axio", 120.0, "Mid", "CAB-1234", 4),
    ("Car", "Mercedes E-Class", 260.0, "Luxury", "CAR-5678", 4),
    ("Van", "Toyota KDH", 180.0, "Mid", "PE-4521", 9),
    ("Van", "Toyota Hiace Luxury", 240.0, "Luxury", "PH-8870", 8),
    ("Bus", "Ashok Leyland Coach", 350.0, "Mid", "NB-2210", 35),
]

DESTINATIONS = [
    ("Culture", "Temple of the Tooth", "Sacred Buddhist temple housing the relic", "Kandy"),
    ("Culture", "Sigiriya Rock Fortress", "Fifth-century palace atop a granite rock", "Sigiriya"),
    ("Culture", "Galle Fort", "Dutch colonial fort by the sea", "Galle"),
    ("Beaches", "Unawatuna Beach", "Sheltered bay for swimming and snorkelling", "Galle"),
    ("Beaches", "Mirissa Beach", "Whale watching and palm-lined sand", "Mirissa"),
    ("Nature", "Nine Arch Bridge", "Colonial railway viaduct in tea country", "Ella"),
    ("Nature", "Horton Plains", "Cloud forest plateau and World's End", "Nuwara Eliya"),
    ("Wildlife", "Yala National Park", "Leopards, elephants and sloth bears", "Tissamaharama"),
    ("Wildlife", "Minneriya National Park", "The great elephant gathering", "Habarana"),
]


async def seed_dev_profile(session: AsyncSession) -> None:
    """Create the dev profile with every role, if missing."""
    profile = await session.get(Profile, DEV_USER_ID)
    if profile is None:
        print(f"Creating dev profile with id {DEV_USER_ID}...")
        session.add(Profile(user_id=DEV_USER_ID, email=DEV_EMAIL, full_name="Dev User"))
        await session.flush()
    else:
        print(f"Dev profile already exists: {profile.email}")

    result = await session.execute(select(UserRole.role).where(UserRole.user_id == DEV_USER_ID))
    granted = set(result.scalars())
    for role in ("admin", "driver", "hotel_owner", "user"):
        if role not in granted:
            session.add(UserRole(user_id=DEV_USER_ID, role=role))


async def seed_catalog(session: AsyncSession) -> bool:
    """Insert the sample catalog unless hotels already exist.

    Returns:
        True if rows were inserted
    """
    existing = await session.execute(select(Hotel.hotel_id).limit(1))
    if existing.scalar_one_or_none() is not None:
        print("Catalog already seeded")
        return False

    for name, min_p, max_p in VEHICLE_TYPES:
        session.add(VehicleType(name=name, min_passengers=min_p, max_passengers=max_p))
    await session.flush()

    for vehicle_type, class_name, multiplier in VEHICLE_CLASSES:
        session.add(
            VehicleClass(
                vehicle_type=vehicle_type, class_name=class_name, price_multiplier=multiplier
            )
        )

    for hotel_name, stars, rate, category, city in HOTELS:
        session.add(
            Hotel(
                user_id=DEV_USER_ID,
                hotel_name=hotel_name,
                stars=stars,
                per_night_charge=rate,
                price_category=category,
                city=city,
                owner_email=DEV_EMAIL,
            )
        )

    for vehicle_type, model, rate, vehicle_class, number, seats in VEHICLES:
        session.add(
            Vehicle(
                user_id=DEV_USER_ID,
                vehicle_type=vehicle_type,
                model=model,
                per_km_charge=rate,
                vehicle_class=vehicle_class,
                vehicle_number=number,
                seating_capacity=seats,
                owner_email=DEV_EMAIL,
            )
        )

    for category, name, description, city in DESTINATIONS:
        session.add(
            Destination(interest_category=category, name=name, description=description, city=city)
        )

    print(
        f"Seeding {len(HOTELS)} hotels, {len(VEHICLES)} vehicles, "
        f"{len(DESTINATIONS)} destinations..."
    )
    return True


async def seed_dev(engine: AsyncEngine | None = None) -> None:
    """Seed dev profile and sample catalog.

    This function is idempotent - safe to run multiple times.
    """
    async with AsyncSession(engine or get_async_engine()) as session:
        await seed_dev_profile(session)
        await seed_catalog(session)
        await session.commit()
        print("Dev seeding complete")


if __name__ == "__main__":
    asyncio.run(seed_dev())
