"""Minimal auth dependencies.

Identity is issued by the external auth provider. Locally the bearer token
is either "<user_id>" or "<user_id>:<email>"; requests without a header run
as the development user.
"""

import uuid
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.context import RequestContext
from backend.app.db.engine import get_session
from backend.app.db.queries import query_roles
from backend.app.models.common import Role

DEV_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")


async def get_current_context(
    authorization: Annotated[str | None, Header()] = None,
) -> RequestContext:
    """Extract request context from authorization header.

    Args:
        authorization: Authorization header (e.g., "Bearer <token>")

    Returns:
        RequestContext with user_id and optional email

    Raises:
        HTTPException: If authorization is invalid
    """
    if not authorization:
        return RequestContext(user_id=DEV_USER_ID)

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[7:]  # Strip "Bearer "
    user_id_str, _, email = token.partition(":")

    try:
        user_id = uuid.UUID(user_id_str)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token format (expected user_id[:email])",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return RequestContext(user_id=user_id, email=email or None)


async def get_roles(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> set[Role]:
    """Roles granted to the caller; unknown role strings are ignored."""
    result = await session.execute(query_roles(ctx))
    roles: set[Role] = set()
    for value in result.scalars():
        try:
            roles.add(Role(value))
        except ValueError:
            continue
    return roles


def require_role(*allowed: Role) -> Callable[..., Awaitable[RequestContext]]:
    """Build a dependency that admits callers holding any of ``allowed``.

    Admins are always admitted.
    """

    async def dependency(
        ctx: Annotated[RequestContext, Depends(get_current_context)],
        roles: Annotated[set[Role], Depends(get_roles)],
    ) -> RequestContext:
        if Role.admin in roles or roles.intersection(allowed):
            return ctx
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied",
        )

    return dependency
