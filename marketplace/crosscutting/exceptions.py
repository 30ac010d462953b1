"""
Name: Custom Exceptions

Responsibilities:
  - Define internal exceptions with a stable error_code
  - Generate unique error ids for log correlation

Collaborators:
  - infrastructure.repositories: raise DatabaseError / DuplicateEmailError
  - identity.tokens: raises InvalidTokenError
  - application.usecases: map ConflictError to typed results

Notes:
  - Expected outcomes (missing record, bad password) are NOT exceptions;
    use cases return them as result values.
  - DatabaseError means the store is unavailable and propagates unchanged.
  - ErrorResponse / to_response() is the hand-off to the embedding API layer,
    which renders it on the wire; nothing inside this package calls it.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ErrorResponse:
    """Structured error payload for an outer API layer."""

    error_code: str
    message: str
    error_id: str

    def to_dict(self) -> dict:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class MarketplaceError(Exception):
    """Base exception for the identity core."""

    error_code: str = "MARKETPLACE_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code, message=self.message, error_id=self.error_id
        )


class DatabaseError(MarketplaceError):
    """Store connection, query, timeout or pool error."""

    error_code: str = "DATABASE_ERROR"


class ConflictError(MarketplaceError):
    """A write collided with existing state."""

    error_code: str = "CONFLICT"


class DuplicateEmailError(ConflictError):
    """Email already taken inside the same role partition."""

    error_code: str = "DUPLICATE_EMAIL"


class InvalidTokenError(MarketplaceError):
    """Access token is expired, tampered or malformed."""

    error_code: str = "INVALID_TOKEN"
