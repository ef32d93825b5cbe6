"""Booking price quotes.

Vehicle subtotal is estimated km times the per-km rate; accommodation
subtotal is nights times the nightly rate. Both add a flat service charge.
"""

from datetime import date

from backend.app.models.booking import PriceQuote

DEFAULT_SERVICE_CHARGE_RATE = 0.10


def _quote(subtotal: float, service_charge_rate: float) -> PriceQuote:
    service_charge = round(subtotal * service_charge_rate, 2)
    subtotal = round(subtotal, 2)
    return PriceQuote(
        subtotal=subtotal,
        service_charge=service_charge,
        total_amount=round(subtotal + service_charge, 2),
    )


def quote_vehicle(
    estimated_km: float,
    per_km_charge: float,
    service_charge_rate: float = DEFAULT_SERVICE_CHARGE_RATE,
) -> PriceQuote:
    """Price a vehicle rental.

    Raises:
        ValueError: If estimated_km is not positive
    """
    if estimated_km <= 0:
        raise ValueError("Estimated kilometers must be greater than 0")
    return _quote(estimated_km * per_km_charge, service_charge_rate)


def nights_between(check_in: date, check_out: date) -> int:
    """Number of nights between check-in and check-out."""
    return (check_out - check_in).days


def quote_accommodation(
    check_in: date,
    check_out: date,
    per_night_charge: float,
    service_charge_rate: float = DEFAULT_SERVICE_CHARGE_RATE,
) -> tuple[int, PriceQuote]:
    """Price a hotel stay.

    Returns:
        (number_of_nights, quote)

    Raises:
        ValueError: If check-out is not after check-in
    """
    nights = nights_between(check_in, check_out)
    if nights <= 0:
        raise ValueError("Check-out date must be after check-in date")
    return nights, _quote(nights * per_night_charge, service_charge_rate)
