"""
Name: JWT Token Issuer

Responsibilities:
  - Issue signed JWT access tokens bound to user id, email and role
  - Issue opaque refresh tokens and persist them against the user id
  - Decode and validate access tokens

Collaborators:
  - domain.services.RefreshTokenStore: refresh token persistence
  - crosscutting.config: JWT secret and TTLs
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from ..crosscutting.exceptions import InvalidTokenError
from ..domain.entities import User, UserRole
from ..domain.services import RefreshTokenStore

JWT_ALGORITHM = "HS256"
REFRESH_TOKEN_BYTES = 48


@dataclass(frozen=True)
class TokenSettings:
    jwt_secret: str
    jwt_access_ttl_minutes: int
    refresh_token_ttl_days: int


@dataclass(frozen=True)
class TokenPayload:
    user_id: UUID
    email: str
    role: UserRole


class JwtTokenIssuer:
    """R: TokenIssuer backed by PyJWT and a refresh token store."""

    def __init__(self, settings: TokenSettings, refresh_store: RefreshTokenStore):
        self._settings = settings
        self._refresh_store = refresh_store

    @property
    def refresh_ttl_seconds(self) -> int:
        return self._settings.refresh_token_ttl_days * 24 * 60 * 60

    def issue_access_token(self, user: User) -> str:
        """R: Create a signed JWT access token."""
        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=self._settings.jwt_access_ttl_minutes)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "role": user.role.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self._settings.jwt_secret, algorithm=JWT_ALGORITHM)

    def issue_refresh_token(self) -> str:
        return secrets.token_urlsafe(REFRESH_TOKEN_BYTES)

    def persist_refresh_token(self, user_id: UUID, token: str) -> None:
        self._refresh_store.save(token, user_id, self.refresh_ttl_seconds)

    def decode_access_token(self, token: str) -> TokenPayload:
        """R: Decode and validate a JWT access token."""
        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[JWT_ALGORITHM],
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token expired.", original_error=exc) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid token.", original_error=exc) from exc

        user_id = payload.get("sub")
        email = payload.get("email")
        role_value = payload.get("role")
        if not user_id or not email or not role_value:
            raise InvalidTokenError("Invalid token.")

        try:
            return TokenPayload(
                user_id=UUID(user_id),
                email=email,
                role=UserRole(role_value),
            )
        except ValueError as exc:
            raise InvalidTokenError("Invalid token.", original_error=exc) from exc
