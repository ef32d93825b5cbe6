"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint.

    Exposes all registered Prometheus metrics including:
    - itinerary_generations_total{outcome}
    - synthesis_latency_ms{outcome}
    - catalog_fetch_errors_total{relation}
    - notification_failures_total{booking_type}
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
