"""
Name: Domain Service Interfaces

Responsibilities:
  - Define contracts for external collaborators (hashing, tokens,
    refresh token storage, approval notification)
  - Enable dependency inversion (use cases don't depend on any provider)

Collaborators:
  - Implementations in identity/ and infrastructure/

Constraints:
  - Pure interfaces (Protocol), no implementation
"""

from typing import Optional, Protocol
from uuid import UUID

from .entities import User


class CredentialVerifier(Protocol):
    """R: Password hashing collaborator."""

    def hash(self, plaintext: str) -> str:
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """R: True iff plaintext matches hashed. Never raises on mismatch."""
        ...


class RefreshTokenStore(Protocol):
    """R: Storage for issued refresh tokens."""

    def save(self, token: str, user_id: UUID, ttl_seconds: int) -> None:
        ...

    def get_user_id(self, token: str) -> Optional[UUID]:
        ...

    def revoke(self, token: str) -> None:
        ...


class TokenIssuer(Protocol):
    """R: Access/refresh token collaborator."""

    def issue_access_token(self, user: User) -> str:
        ...

    def issue_refresh_token(self) -> str:
        ...

    def persist_refresh_token(self, user_id: UUID, token: str) -> None:
        ...


class ApprovalNotifier(Protocol):
    """
    R: Tells customer-service staff that a customer awaits approval.

    Best-effort: callers swallow (and log) any failure.
    """

    def notify(self, user: User) -> None:
        ...
