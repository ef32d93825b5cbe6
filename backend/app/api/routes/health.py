"""Health check endpoints.

- /health: liveness only
- /healthz: database connectivity, 503 when degraded
"""

import json
from typing import Any

from fastapi import APIRouter, Response
from sqlalchemy import text

from backend.app.config import Settings, get_settings
from backend.app.db.engine import create_engine_from_settings, create_session_factory

router = APIRouter()


async def check_db(settings: Settings) -> tuple[bool, str]:
    """Check database connectivity.

    Returns:
        (is_ok, status_message)
    """
    try:
        engine = create_engine_from_settings(settings)
        session_factory = create_session_factory(engine)

        with session_factory() as session:
            session.execute(text("SELECT 1"))

        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


def check_integrations(settings: Settings) -> dict[str, str]:
    """Report which third-party integrations have credentials configured."""
    return {
        "weather": "configured" if settings.openweather_api_key else "not_configured",
        "directions": "configured" if settings.ors_api_key else "not_configured",
        "email": "configured" if settings.resend_api_key else "not_configured",
    }


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if the database is reachable
        503 otherwise
    """
    settings = get_settings()

    db_ok, db_status = await check_db(settings)

    response_body = {
        "status": "ok" if db_ok else "degraded",
        "components": {"db": db_status, **check_integrations(settings)},
    }

    if not db_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
