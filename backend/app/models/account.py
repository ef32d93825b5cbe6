"""Account models - profiles, role requests and the admin overview."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from backend.app.models.booking import Booking
from backend.app.models.common import Role

# Roles a user may ask for; admin and user are never requested
REQUESTABLE_ROLES = frozenset({Role.driver, Role.hotel_owner})


class RoleRequestStatus(str, Enum):
    """Review state of a role request."""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class UserProfile(BaseModel):
    """Caller's profile plus granted roles."""

    user_id: str
    email: str | None = None
    full_name: str | None = None
    phone: str | None = None
    bio: str | None = None
    country: str | None = None
    roles: list[Role] = Field(default_factory=list)


class UpdateProfileRequest(BaseModel):
    """Profile fields a user may edit; omitted fields are left unchanged."""

    full_name: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)
    bio: str | None = Field(None, max_length=2000)
    country: str | None = Field(None, max_length=100)


class CreateRoleRequest(BaseModel):
    """Request body for POST /role-requests."""

    requested_role: Role

    @field_validator("requested_role")
    @classmethod
    def validate_requestable(cls, v: Role) -> Role:
        """Only driver and hotel_owner can be requested."""
        if v not in REQUESTABLE_ROLES:
            raise ValueError("requested_role must be driver or hotel_owner")
        return v


class RoleRequest(BaseModel):
    """Stored role request."""

    request_id: str
    user_id: str
    requested_role: Role
    status: RoleRequestStatus
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    created_at: datetime


class UserSummary(BaseModel):
    """User row in the admin overview."""

    user_id: str
    email: str | None = None
    full_name: str | None = None
    roles: list[Role] = Field(default_factory=list)
    created_at: datetime


class AdminStats(BaseModel):
    """Headline counts for the admin overview."""

    total_users: int
    total_bookings: int
    total_vehicles: int
    total_hotels: int
    pending_requests: int


class AdminOverview(BaseModel):
    """Everything the admin dashboard shows."""

    stats: AdminStats
    users: list[UserSummary]
    bookings: list[Booking]
    role_requests: list[RoleRequest]
