"""API dependencies: database session and the admin session cookie."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from society_cms.db import get_db
from society_cms.models import User
from society_cms.services.auth import auth_service

ADMIN_REQUIRED = "Unauthorized - Admin access required"


def _session_user_id(request: Request) -> UUID | None:
    """User id from a valid ``access_token`` cookie, or None."""
    token = request.cookies.get("access_token")
    payload = auth_service.verify_access_token(token) if token else None
    if not payload or not payload.get("sub"):
        return None

    try:
        return UUID(payload["sub"])
    except ValueError:
        return None


async def get_session_user(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User | None:
    """The logged-in user, or None when there is no usable session."""
    user_id = _session_user_id(request)
    if user_id is None:
        return None
    return await db.get(User, user_id)


async def get_current_user(user: Annotated[User | None, Depends(get_session_user)]) -> User:
    """Require a logged-in, active user."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive",
        )

    return user


async def get_admin_user(user: Annotated[User | None, Depends(get_session_user)]) -> User:
    """Require an active admin; anything else is reported the same way."""
    if user is None or not user.is_active or not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ADMIN_REQUIRED,
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(get_admin_user)]
DBSession = Annotated[AsyncSession, Depends(get_db)]
