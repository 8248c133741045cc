"""Authentication routes."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, Response, status
from sqlalchemy import select

from society_cms.api.deps import CurrentUser, DBSession
from society_cms.config import settings
from society_cms.models import User
from society_cms.schemas.auth import UserLogin, UserResponse
from society_cms.schemas.common import ApiResponse
from society_cms.services.auth import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])

# Cookie settings
ACCESS_TOKEN_MAX_AGE = settings.jwt_access_token_expire_minutes * 60
REFRESH_TOKEN_MAX_AGE = settings.jwt_refresh_token_expire_days * 86400


def set_auth_cookies(response: Response, access_token: str, refresh_token: str) -> None:
    """Set HTTP-only authentication cookies."""
    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        secure=not settings.is_development,  # True for HTTPS in production
        samesite="lax",
        max_age=ACCESS_TOKEN_MAX_AGE,
        path="/",
    )
    response.set_cookie(
        key="refresh_token",
        value=refresh_token,
        httponly=True,
        secure=not settings.is_development,
        samesite="lax",
        max_age=REFRESH_TOKEN_MAX_AGE,
        path="/",
    )


def clear_auth_cookies(response: Response) -> None:
    """Clear authentication cookies."""
    response.delete_cookie(key="access_token", path="/")
    response.delete_cookie(key="refresh_token", path="/")


@router.post("/login", response_model=ApiResponse[UserResponse])
async def login(user_data: UserLogin, response: Response, db: DBSession) -> ApiResponse[UserResponse]:
    """Login and set HTTP-only cookies."""
    result = await db.execute(select(User).where(User.email == user_data.email))
    user = result.scalar_one_or_none()

    if not user or not auth_service.verify_password(user_data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive",
        )

    access_token = auth_service.create_access_token(user.id, user.email)
    refresh_token = auth_service.create_refresh_token(user.id, user.email)
    set_auth_cookies(response, access_token, refresh_token)

    return ApiResponse(data=UserResponse.model_validate(user))


@router.post("/refresh", response_model=ApiResponse[UserResponse])
async def refresh_token(request: Request, response: Response, db: DBSession) -> ApiResponse[UserResponse]:
    """Refresh access token using refresh token from cookie."""
    refresh_token_value = request.cookies.get("refresh_token")

    if not refresh_token_value:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No refresh token provided",
        )

    payload = auth_service.verify_refresh_token(refresh_token_value)
    user_id = payload.get("sub") if payload else None

    if not user_id:
        clear_auth_cookies(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )

    result = await db.execute(select(User).where(User.id == UUID(user_id)))
    user = result.scalar_one_or_none()

    if not user or not user.is_active:
        clear_auth_cookies(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    new_access_token = auth_service.create_access_token(user.id, user.email)
    new_refresh_token = auth_service.create_refresh_token(user.id, user.email)
    set_auth_cookies(response, new_access_token, new_refresh_token)

    return ApiResponse(data=UserResponse.model_validate(user))


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response) -> ApiResponse[None]:
    """Logout and clear authentication cookies."""
    clear_auth_cookies(response)
    return ApiResponse(message="Successfully logged out")


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_current_user_info(current_user: CurrentUser) -> ApiResponse[UserResponse]:
    """Get current authenticated user info."""
    return ApiResponse(data=UserResponse.model_validate(current_user))
