"""
Name: Authenticate User Use Case

Responsibilities:
  - Look up the user by email inside the partition of the requested role
  - Verify the password and issue access + refresh tokens
  - Persist the refresh token against the user id

Collaborators:
  - domain.repositories.UserRepository
  - domain.services.CredentialVerifier
  - domain.services.TokenIssuer

Constraints:
  - Unknown email, wrong partition, wrong password and (when enabled) an
    unapproved customer all return the identical AUTH_FAILED result.
  - A lookup miss still runs one verify against a placeholder hash, so the
    miss path costs the same as a wrong password.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from ...crosscutting.logger import logger
from ...domain.entities import UserRole, normalize_email, partition_of
from ...domain.repositories import UserRepository
from ...domain.services import CredentialVerifier, TokenIssuer
from .user_results import AuthResult, UserError, UserErrorCode

INVALID_CREDENTIALS = "Invalid credentials."
_PLACEHOLDER_PASSWORD = "placeholder-password-for-unknown-accounts"


@lru_cache(maxsize=8)
def _placeholder_hash(verifier: CredentialVerifier) -> str:
    """R: One hash per verifier instance, reused for every lookup miss."""
    return verifier.hash(_PLACEHOLDER_PASSWORD)


@dataclass(frozen=True)
class AuthenticateUserInput:
    email: str
    password: str
    role: UserRole | str


class AuthenticateUserUseCase:
    """R: Login: credentials in, user and tokens out."""

    def __init__(
        self,
        repository: UserRepository,
        verifier: CredentialVerifier,
        token_issuer: TokenIssuer,
        *,
        require_customer_approval: bool = False,
    ) -> None:
        self._users = repository
        self._verifier = verifier
        self._tokens = token_issuer
        self._require_customer_approval = require_customer_approval

    def execute(self, input_data: AuthenticateUserInput) -> AuthResult:
        try:
            role = UserRole(input_data.role)
        except ValueError:
            return self._failed()

        email = normalize_email(input_data.email)
        user = self._users.get_user_by_email_and_partition(email, partition_of(role))
        if user is None:
            self._verifier.verify(
                input_data.password or "", _placeholder_hash(self._verifier)
            )
            return self._failed()
        if not self._verifier.verify(input_data.password or "", user.password_hash):
            return self._failed()
        if self._require_customer_approval and user.is_customer and not user.is_approved:
            return self._failed()

        access_token = self._tokens.issue_access_token(user)
        refresh_token = self._tokens.issue_refresh_token()
        self._tokens.persist_refresh_token(user.id, refresh_token)

        logger.info(
            "User authenticated",
            extra={"user_id": str(user.id), "role": user.role.value},
        )
        return AuthResult(
            user=user,
            access_token=access_token,
            refresh_token=refresh_token,
        )

    @staticmethod
    def _failed() -> AuthResult:
        logger.info("Authentication failed")
        return AuthResult(
            error=UserError(code=UserErrorCode.AUTH_FAILED, message=INVALID_CREDENTIALS)
        )
