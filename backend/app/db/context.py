"""Request context for ownership enforcement."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class RequestContext:
    """Authenticated caller identity.

    Identity comes from the external auth provider; every saved-itinerary and
    booking query is scoped by ``user_id``.
    """

    user_id: UUID
    email: str | None = None
    display_name: str | None = None
