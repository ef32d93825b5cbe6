"""Planner entry point - runs the synthesizer with settings, logging and metrics."""

import time

from backend.app.config import Settings, get_settings
from backend.app.models.catalog import Catalog
from backend.app.models.itinerary import ItineraryResult
from backend.app.models.trip import TripRequest
from backend.app.planning.distance import FixedDailyDistance
from backend.app.planning.errors import SynthesisError
from backend.app.planning.synthesizer import synthesize
from backend.app.utils.logging import StructuredPlannerLogger
from backend.app.utils.metrics import metrics

_planner_logger = StructuredPlannerLogger()


def plan_trip(
    request: TripRequest, catalog: Catalog, settings: Settings | None = None
) -> ItineraryResult:
    """Generate an itinerary, recording the outcome.

    Args:
        request: Trip parameters
        catalog: Catalog snapshot
        settings: Settings (defaults to the cached application settings)

    Returns:
        Generated itinerary

    Raises:
        SynthesisError: Propagated unchanged from the synthesizer
    """
    settings = settings or get_settings()
    policy = FixedDailyDistance(settings.daily_distance_km)

    start = time.perf_counter()
    try:
        result = synthesize(request, catalog, distance_policy=policy, max_days=settings.max_trip_days)
    except SynthesisError as e:
        latency_ms = (time.perf_counter() - start) * 1000
        outcome = "invalid" if e.is_validation_error else "no_match"
        metrics.record_synthesis(outcome, latency_ms)
        _planner_logger.log_synthesis(
            request, outcome, latency_ms, rejection_code=e.code.value
        )
        raise

    latency_ms = (time.perf_counter() - start) * 1000
    metrics.record_synthesis("success", latency_ms)
    _planner_logger.log_synthesis(
        request,
        "success",
        latency_ms,
        total_cost=result.total_cost,
        violation_codes=[v.code for v in result.violations],
    )
    return result
