"""Account endpoints - the caller's profile and role requests."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.auth import get_current_context
from backend.app.db.context import RequestContext
from backend.app.db.engine import get_session
from backend.app.db.repositories import AccountRepository, RoleRequestConflictError
from backend.app.db.sql_repositories import SqlAccountRepository
from backend.app.models.account import (
    CreateRoleRequest,
    RoleRequest,
    UpdateProfileRequest,
    UserProfile,
)

router = APIRouter(tags=["accounts"])


def get_account_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> AccountRepository:
    """FastAPI dependency for the account repository."""
    return SqlAccountRepository(session)


@router.get("/me", response_model=UserProfile)
async def get_my_profile(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[AccountRepository, Depends(get_account_repository)],
) -> UserProfile:
    """Caller's profile and granted roles."""
    return await repo.get_profile(ctx)


@router.put("/me", response_model=UserProfile)
async def update_my_profile(
    request: UpdateProfileRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[AccountRepository, Depends(get_account_repository)],
) -> UserProfile:
    """Update name, phone, bio or country; omitted fields are kept."""
    return await repo.update_profile(request, ctx)


@router.post("/role-requests", response_model=RoleRequest, status_code=status.HTTP_201_CREATED)
async def request_role(
    request: CreateRoleRequest,
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    repo: Annotated[AccountRepository, Depends(get_account_repository)],
) -> RoleRequest:
    """Ask an admin for the driver or hotel_owner role.

    Raises:
        HTTPException: 409 if the role is already held or a request is pending
    """
    try:
        return await repo.create_role_request(request.requested_role, ctx)
    except RoleRequestConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
