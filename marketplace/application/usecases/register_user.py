"""
Name: Register User Use Case

Responsibilities:
  - Validate registration input and the role
  - Enforce email uniqueness inside the role's partition
  - Build the record (hashed password, approval default, empty reputation
    for vendors) and insert it
  - Dispatch the pending-approval notification for customers

Collaborators:
  - domain.repositories.UserRepository
  - domain.services.CredentialVerifier
  - domain.services.ApprovalNotifier

Notes:
  - Duplicate email and a too-short password produce the same CONFLICT
    result so callers cannot tell which check rejected them.
  - The store constraint is authoritative; the pre-check only avoids
    hashing a password for an insert that would fail.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from ...crosscutting.exceptions import DuplicateEmailError
from ...crosscutting.logger import logger
from ...domain.entities import (
    User,
    UserRole,
    VendorDetails,
    default_approval,
    normalize_email,
    partition_of,
)
from ...domain.repositories import UserRepository
from ...domain.services import ApprovalNotifier, CredentialVerifier
from .user_results import UserResult, conflict, validation_error

REGISTRATION_REJECTED = "Registration could not be completed."


@dataclass(frozen=True)
class RegisterUserInput:
    email: str
    username: str
    password: str
    role: UserRole | str
    address: str | None = None
    mobile_number: str | None = None


class RegisterUserUseCase:
    """R: Create a new marketplace account."""

    def __init__(
        self,
        repository: UserRepository,
        verifier: CredentialVerifier,
        notifier: ApprovalNotifier,
        *,
        min_password_length: int = 8,
    ) -> None:
        self._users = repository
        self._verifier = verifier
        self._notifier = notifier
        self._min_password_length = min_password_length

    def execute(self, input_data: RegisterUserInput) -> UserResult:
        email = normalize_email(input_data.email)
        username = (input_data.username or "").strip()
        if not email or "@" not in email:
            return validation_error("A valid email is required.")
        if not username:
            return validation_error("Username is required.")
        try:
            role = UserRole(input_data.role)
        except ValueError:
            return validation_error(f"Unknown role: {input_data.role}")

        partition = partition_of(role)
        if len(input_data.password or "") < self._min_password_length:
            logger.info(
                "Registration rejected",
                extra={"partition": partition.value, "reason": "weak_password"},
            )
            return conflict(REGISTRATION_REJECTED)

        if self._users.get_user_by_email_and_partition(email, partition) is not None:
            logger.info(
                "Registration rejected",
                extra={"partition": partition.value, "reason": "duplicate_email"},
            )
            return conflict(REGISTRATION_REJECTED)

        user = User(
            id=uuid4(),
            email=email,
            username=username,
            password_hash=self._verifier.hash(input_data.password),
            role=role,
            is_approved=default_approval(role),
            address=input_data.address,
            mobile_number=input_data.mobile_number,
            vendor_details=VendorDetails() if role == UserRole.VENDOR else None,
        )

        try:
            created = self._users.create_user(user)
        except DuplicateEmailError:
            # Lost the race against a concurrent registration
            logger.info(
                "Registration rejected",
                extra={"partition": partition.value, "reason": "duplicate_email"},
            )
            return conflict(REGISTRATION_REJECTED)

        logger.info(
            "User registered",
            extra={"user_id": str(created.id), "role": role.value},
        )

        if created.is_customer:
            self._dispatch_approval_notification(created)

        return UserResult(user=created)

    def _dispatch_approval_notification(self, user: User) -> None:
        try:
            self._notifier.notify(user)
        except Exception:
            logger.exception(
                "Approval notification failed",
                extra={"user_id": str(user.id)},
            )
