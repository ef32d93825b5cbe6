"""Structured logging for itinerary synthesis."""

import logging
from typing import Any

from backend.app.models.trip import TripRequest

logger = logging.getLogger(__name__)


class StructuredPlannerLogger:
    """Structured logger for synthesis outcomes."""

    def log_synthesis(
        self,
        request: TripRequest,
        outcome: str,
        latency_ms: float,
        total_cost: float | None = None,
        rejection_code: str | None = None,
        violation_codes: list[str] | None = None,
    ) -> None:
        """Log one synthesis attempt with structured data."""
        log_data: dict[str, Any] = {
            "days": request.days,
            "guests": request.guests,
            "interests": list(request.interests),
            "hotel_category": request.hotel_category,
            "vehicle_type": request.vehicle_type,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 3),
        }

        if total_cost is not None:
            log_data["total_cost"] = round(total_cost, 2)
        if rejection_code:
            log_data["rejection_code"] = rejection_code
        if violation_codes:
            log_data["violations"] = violation_codes

        log_msg = f"Itinerary synthesis - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
