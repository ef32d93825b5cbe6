"""Admin endpoints - role request review and the dashboard overview.

Every route requires the admin role.
"""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend.app.api.auth import require_role
from backend.app.api.routes.accounts import get_account_repository
from backend.app.db.context import RequestContext
from backend.app.db.repositories import AccountRepository, RoleRequestConflictError
from backend.app.models.account import AdminOverview, RoleRequest, RoleRequestStatus
from backend.app.models.common import Role

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

AdminContext = Annotated[RequestContext, Depends(require_role(Role.admin))]


def _parse_request_id(request_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(request_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request_id format",
        ) from e


async def _review(
    request_id: str,
    decision: RoleRequestStatus,
    ctx: RequestContext,
    repo: AccountRepository,
) -> RoleRequest:
    try:
        reviewed = await repo.review_role_request(_parse_request_id(request_id), decision, ctx)
    except RoleRequestConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    if reviewed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role request not found")

    logger.info(
        f"[admin] role request {reviewed.request_id} {decision.value} "
        f"({reviewed.requested_role.value} for {reviewed.user_id})"
    )
    return reviewed


@router.get("/overview", response_model=AdminOverview)
async def get_overview(
    ctx: AdminContext,
    repo: Annotated[AccountRepository, Depends(get_account_repository)],
) -> AdminOverview:
    """Counts plus all users, bookings and role requests."""
    return await repo.admin_overview()


@router.get("/role-requests", response_model=list[RoleRequest])
async def list_role_requests(
    ctx: AdminContext,
    repo: Annotated[AccountRepository, Depends(get_account_repository)],
    request_status: Annotated[RoleRequestStatus | None, Query(alias="status")] = None,
) -> list[RoleRequest]:
    """List role requests, newest first, optionally by status."""
    return await repo.list_role_requests(request_status)


@router.post("/role-requests/{request_id}/approve", response_model=RoleRequest)
async def approve_role_request(
    request_id: str,
    ctx: AdminContext,
    repo: Annotated[AccountRepository, Depends(get_account_repository)],
) -> RoleRequest:
    """Approve a pending request and grant the role.

    Raises:
        HTTPException: 404 if not found, 409 if already reviewed
    """
    return await _review(request_id, RoleRequestStatus.approved, ctx, repo)


@router.post("/role-requests/{request_id}/reject", response_model=RoleRequest)
async def reject_role_request(
    request_id: str,
    ctx: AdminContext,
    repo: Annotated[AccountRepository, Depends(get_account_repository)],
) -> RoleRequest:
    """Reject a pending request."""
    return await _review(request_id, RoleRequestStatus.rejected, ctx, repo)
