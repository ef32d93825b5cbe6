"""Provenance stamps for third-party travel lookups."""

from datetime import UTC, datetime

import httpx

from backend.app.models.common import Provenance


def provider_provenance(service: str, provider: str, url: str) -> Provenance:
    """Record which provider answered a travel lookup.

    Args:
        service: Lookup kind, "weather" or "directions"
        provider: Provider name, e.g. "openweathermap"
        url: Request URL; the query string is dropped so API keys never leak

    Returns:
        Provenance with source "<service>:<provider>" and fetched_at=now(UTC)
    """
    return Provenance(
        source=f"{service}:{provider}",
        service=service,
        provider=provider,
        source_url=str(httpx.URL(url).copy_with(query=None)),
        fetched_at=datetime.now(UTC),
    )
