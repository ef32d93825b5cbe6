"""Catalog loader - fetches all five catalog relations into memory.

Each relation is read in full through its own session, concurrently. A
relation that fails to load is logged and comes back empty; the rest of the
catalog still loads. There is no retry and no cross-relation consistency.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.app.db import models as db
from backend.app.models.catalog import Catalog, Destination, Hotel, Vehicle, VehicleClass, VehicleType
from backend.app.models.common import canonical_interest
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def hotel_from_row(row: db.Hotel) -> Hotel:
    return Hotel(
        hotel_id=str(row.hotel_id),
        hotel_name=row.hotel_name,
        stars=row.stars,
        per_night_charge=row.per_night_charge,
        price_category=row.price_category.strip().title(),
        city=row.city,
        address=row.address,
        description=row.description,
        image_url=row.image_url,
        owner_id=str(row.user_id) if row.user_id else None,
        owner_email=row.owner_email,
    )


def vehicle_from_row(row: db.Vehicle) -> Vehicle:
    return Vehicle(
        vehicle_id=str(row.vehicle_id),
        vehicle_type=row.vehicle_type,
        model=row.model,
        per_km_charge=row.per_km_charge,
        vehicle_class=row.vehicle_class,
        vehicle_number=row.vehicle_number,
        seating_capacity=row.seating_capacity,
        image_url=row.image_url,
        owner_id=str(row.user_id) if row.user_id else None,
        owner_email=row.owner_email,
    )


def destination_from_row(row: db.Destination) -> Destination:
    return Destination(
        destination_id=str(row.destination_id),
        interest_category=canonical_interest(row.interest_category),
        name=row.name,
        description=row.description or "",
        city=row.city,
    )


def vehicle_type_from_row(row: db.VehicleType) -> VehicleType:
    return VehicleType(
        name=row.name, min_passengers=row.min_passengers, max_passengers=row.max_passengers
    )


def vehicle_class_from_row(row: db.VehicleClass) -> VehicleClass:
    return VehicleClass(
        vehicle_type=row.vehicle_type,
        class_name=row.class_name,
        price_multiplier=row.price_multiplier,
    )


# relation name -> (ORM model, ordering column, row converter)
RELATIONS: dict[str, tuple[type[db.Base], Any, Callable[[Any], BaseModel]]] = {
    "hotels": (db.Hotel, db.Hotel.created_at, hotel_from_row),
    "vehicles": (db.Vehicle, db.Vehicle.created_at, vehicle_from_row),
    "destinations": (db.Destination, db.Destination.name, destination_from_row),
    "vehicle_types": (db.VehicleType, db.VehicleType.name, vehicle_type_from_row),
    "vehicle_classes": (db.VehicleClass, db.VehicleClass.class_name, vehicle_class_from_row),
}


async def fetch_relation(
    engine: AsyncEngine,
    relation: str,
    model: type[db.Base],
    order_by: Any,
    convert: Callable[[Any], M],
) -> list[M]:
    """Fetch one relation in full.

    Rows that violate entity invariants are logged and skipped. Any failure
    of the fetch itself is logged and yields an empty list.
    """
    try:
        async with AsyncSession(engine) as session:
            result = await session.execute(select(model).order_by(order_by))
            rows = list(result.scalars())

            items: list[M] = []
            for row in rows:
                try:
                    items.append(convert(row))
                except ValidationError as e:
                    logger.warning(
                        f"[catalog] skipping invalid {relation} row: {e.error_count()} error(s)"
                    )
            return items
    except Exception as e:
        logger.error(f"[catalog] failed to load {relation}: {type(e).__name__}: {e}")
        metrics.inc_catalog_error(relation)
        return []


async def load_catalog(engine: AsyncEngine) -> Catalog:
    """Load a full catalog snapshot.

    Args:
        engine: Async engine; each relation gets its own session

    Returns:
        Catalog with every relation that could be read
    """
    names = list(RELATIONS)
    results = await asyncio.gather(
        *(fetch_relation(engine, name, *RELATIONS[name]) for name in names)
    )
    loaded = dict(zip(names, results, strict=True))

    logger.info(
        "[catalog] loaded "
        + ", ".join(f"{len(loaded[name])} {name}" for name in names)
    )
    return Catalog(**{name: tuple(items) for name, items in loaded.items()})
