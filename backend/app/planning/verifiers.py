"""Verification functions for budget and capacity constraints.

Verifiers only report. They never reject a request or change which hotel
and vehicle were selected.
"""

from backend.app.models.catalog import Catalog, Vehicle
from backend.app.models.trip import TripRequest
from backend.app.models.violations import Violation, ViolationKind, ViolationSeverity


def verify_budget(request: TripRequest, total_cost: float) -> list[Violation]:
    """Flag an itinerary whose total cost exceeds the stated budget.

    Args:
        request: Trip request with budget
        total_cost: Grand total of the generated itinerary

    Returns:
        Empty list when within budget, otherwise a single ADVISORY violation
    """
    budget = request.budget
    if budget <= 0 or total_cost <= budget:
        return []

    return [
        Violation(
            kind=ViolationKind.BUDGET,
            code="OVER_BUDGET",
            message="Total itinerary cost exceeds the stated budget.",
            severity=ViolationSeverity.ADVISORY,
            details={
                "total_cost": round(total_cost, 2),
                "budget": budget,
                "ratio": round(total_cost / budget, 3),
            },
        )
    ]


def verify_capacity(request: TripRequest, vehicle: Vehicle, catalog: Catalog) -> list[Violation]:
    """Flag a vehicle that cannot seat the party.

    Uses the vehicle's own seating capacity when known, otherwise the
    passenger range of its vehicle type.

    Args:
        request: Trip request with guest count
        vehicle: Vehicle chosen for the trip
        catalog: Catalog snapshot holding vehicle types

    Returns:
        Empty list when the party fits or capacity is unknown
    """
    guests = request.guests

    if vehicle.seating_capacity is not None:
        if guests <= vehicle.seating_capacity:
            return []
        limit = vehicle.seating_capacity
    else:
        matching = [
            vt for vt in catalog.vehicle_types if vt.name.lower() == vehicle.vehicle_type.lower()
        ]
        if not matching or guests <= matching[0].max_passengers:
            return []
        limit = matching[0].max_passengers

    return [
        Violation(
            kind=ViolationKind.CAPACITY,
            code="VEHICLE_TOO_SMALL",
            message=f"The selected {vehicle.vehicle_type} may not seat {guests} guests.",
            severity=ViolationSeverity.ADVISORY,
            details={"guests": guests, "capacity": limit, "vehicle_id": vehicle.vehicle_id},
        )
    ]


def run_verifiers(
    request: TripRequest, vehicle: Vehicle, total_cost: float, catalog: Catalog
) -> list[Violation]:
    """Run all verifiers and concatenate their findings."""
    violations: list[Violation] = []
    violations.extend(verify_budget(request, total_cost))
    violations.extend(verify_capacity(request, vehicle, catalog))
    return violations
