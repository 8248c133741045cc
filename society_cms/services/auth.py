"""Authentication service with JWT and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import bcrypt
from jose import JWTError, jwt

from society_cms.config import settings


class AuthService:
    """Service for authentication operations."""

    def __init__(self):
        self.secret_key = settings.jwt_secret_key
        self.algorithm = settings.jwt_algorithm
        self.access_token_expire_minutes = settings.jwt_access_token_expire_minutes
        self.refresh_token_expire_days = settings.jwt_refresh_token_expire_days

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password.encode(), salt).decode()

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())

    def _create_token(self, user_id: UUID, email: str, token_type: str, expires: timedelta) -> str:
        to_encode: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "type": token_type,
            "exp": datetime.now(timezone.utc) + expires,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def create_access_token(self, user_id: UUID, email: str) -> str:
        """Create a JWT access token."""
        return self._create_token(
            user_id, email, "access", timedelta(minutes=self.access_token_expire_minutes)
        )

    def create_refresh_token(self, user_id: UUID, email: str) -> str:
        """Create a JWT refresh token."""
        return self._create_token(
            user_id, email, "refresh", timedelta(days=self.refresh_token_expire_days)
        )

    def decode_token(self, token: str) -> dict[str, Any] | None:
        """Decode and validate a JWT token."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None

    def verify_access_token(self, token: str) -> dict[str, Any] | None:
        """Verify an access token and return the payload."""
        payload = self.decode_token(token)
        if payload and payload.get("type") == "access":
            return payload
        return None

    def verify_refresh_token(self, token: str) -> dict[str, Any] | None:
        """Verify a refresh token and return the payload."""
        payload = self.decode_token(token)
        if payload and payload.get("type") == "refresh":
            return payload
        return None


auth_service = AuthService()
