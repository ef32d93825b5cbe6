"""Itinerary synthesizer - greedy hotel/vehicle selection and day-by-day costing.

The synthesizer is a pure function of (TripRequest, Catalog). It never awaits
I/O, keeps no state between calls, and returns identical results for
identical inputs.

Selection rules:
1. Interests map to canonical category labels. Destinations in those
   categories are "relevant"; their distinct non-null cities are "relevant
   cities".
2. Hotels must match the price category. Hotels in a relevant city are
   preferred; if none are, every category hotel stays a candidate. Candidates
   are ranked by stars, highest first, ties kept in catalog order.
3. Vehicles must contain the requested type name (case-insensitive) and, if
   a class was requested, match it exactly. Ranked by per-km rate, lowest
   first, ties kept in catalog order.
4. One hotel and one vehicle serve the whole trip.
5. Day i rotates through the interests in request order and through that
   interest's destinations.
"""

from backend.app.models.catalog import Catalog, Destination, Hotel, Vehicle
from backend.app.models.common import canonical_interest
from backend.app.models.itinerary import DayPlan, ItineraryResult
from backend.app.models.trip import TripRequest
from backend.app.planning.distance import DailyDistancePolicy, FixedDailyDistance
from backend.app.planning.errors import RejectionCode, SynthesisError
from backend.app.planning.verifiers import run_verifiers

MAX_TRIP_DAYS = 30


def validate_request(request: TripRequest, max_days: int = MAX_TRIP_DAYS) -> None:
    """Check a trip request, raising on the first failing rule.

    Raises:
        SynthesisError: With the code of the first rule that fails
    """
    if not 1 <= request.days <= max_days:
        raise SynthesisError(
            RejectionCode.DAYS_OUT_OF_RANGE,
            f"Please enter a valid number of days (1-{max_days})",
        )
    if request.guests < 1:
        raise SynthesisError(
            RejectionCode.GUESTS_OUT_OF_RANGE, "Please enter at least 1 guest"
        )
    if not request.budget > 0:
        raise SynthesisError(RejectionCode.BUDGET_INVALID, "Please enter a valid budget")
    if not [i for i in request.interests if i.strip()]:
        raise SynthesisError(
            RejectionCode.NO_INTERESTS, "Please select at least one interest"
        )
    if request.hotel_category is None:
        raise SynthesisError(
            RejectionCode.NO_HOTEL_CATEGORY, "Please select a hotel category"
        )
    if not (request.vehicle_type or "").strip():
        raise SynthesisError(RejectionCode.NO_VEHICLE_TYPE, "Please select a vehicle type")


def selected_interests(request: TripRequest) -> list[str]:
    """Canonical interest labels in request order, blanks dropped."""
    return [canonical_interest(i) for i in request.interests if i.strip()]


def relevant_destinations(interests: list[str], catalog: Catalog) -> list[Destination]:
    """Destinations whose category is one of the selected interests."""
    wanted = set(interests)
    return [d for d in catalog.destinations if d.interest_category in wanted]


def relevant_cities(destinations: list[Destination]) -> set[str]:
    """Distinct non-null cities of the given destinations."""
    return {d.city for d in destinations if d.city}


def rank_hotels(request: TripRequest, catalog: Catalog, cities: set[str]) -> list[Hotel]:
    """Category-matching hotels, relevant cities preferred, best stars first."""
    in_category = [h for h in catalog.hotels if h.price_category == request.hotel_category]

    candidates = in_category
    if cities:
        in_city = [h for h in in_category if h.city in cities]
        if in_city:
            candidates = in_city

    # sorted() is stable, so equal ratings keep catalog order
    return sorted(candidates, key=lambda h: -h.stars)


def rank_vehicles(request: TripRequest, catalog: Catalog) -> list[Vehicle]:
    """Type (and optional class) matching vehicles, cheapest per km first."""
    wanted_type = (request.vehicle_type or "").strip().lower()
    matching = [v for v in catalog.vehicles if wanted_type in v.vehicle_type.lower()]

    if request.vehicle_class:
        matching = [v for v in matching if v.vehicle_class == request.vehicle_class]

    return sorted(matching, key=lambda v: v.per_km_charge)


def _activity_for(
    interest: str, destinations: list[Destination], day_index: int, city: str
) -> tuple[str, Destination | None]:
    options = [d for d in destinations if d.interest_category == interest]
    if not options:
        return f"Explore {interest.lower()} experiences around {city}", None

    destination = options[day_index % len(options)]
    if destination.description:
        return f"{destination.name}: {destination.description}", destination
    return destination.name, destination


def synthesize(
    request: TripRequest,
    catalog: Catalog,
    distance_policy: DailyDistancePolicy | None = None,
    max_days: int = MAX_TRIP_DAYS,
) -> ItineraryResult:
    """Generate a day-by-day itinerary for a trip request.

    Args:
        request: Trip parameters
        catalog: Catalog snapshot
        distance_policy: Kilometres driven per day (default 100 km flat)
        max_days: Upper bound on trip length

    Returns:
        ItineraryResult with one DayPlan per day and the grand total

    Raises:
        SynthesisError: On invalid input or when no hotel/vehicle matches
    """
    validate_request(request, max_days=max_days)
    policy = distance_policy or FixedDailyDistance()

    interests = selected_interests(request)
    destinations = relevant_destinations(interests, catalog)
    cities = relevant_cities(destinations)

    hotels = rank_hotels(request, catalog, cities)
    if not hotels:
        raise SynthesisError(
            RejectionCode.NO_HOTELS_FOUND, f"No {request.hotel_category} hotels found"
        )

    vehicles = rank_vehicles(request, catalog)
    if not vehicles:
        raise SynthesisError(
            RejectionCode.NO_VEHICLES_FOUND, f"No {request.vehicle_type} vehicles found"
        )

    hotel = hotels[0]
    vehicle = vehicles[0]

    day_plans: list[DayPlan] = []
    total = 0.0
    for i in range(request.days):
        interest = interests[i % len(interests)]
        activity, destination = _activity_for(interest, destinations, i, hotel.city)

        distance_km = policy.km_for_day(i)
        transport_cost = vehicle.per_km_charge * distance_km
        daily_total = hotel.per_night_charge + transport_cost
        total += daily_total

        day_plans.append(
            DayPlan(
                day=i + 1,
                interest=interest,
                activity=activity,
                destination=destination,
                hotel=hotel,
                vehicle=vehicle,
                distance_km=distance_km,
                accommodation_cost=hotel.per_night_charge,
                transport_cost=transport_cost,
                daily_total=daily_total,
            )
        )

    return ItineraryResult(
        days=day_plans,
        total_cost=total,
        hotel=hotel,
        vehicle=vehicle,
        violations=run_verifiers(request, vehicle, total, catalog),
    )
