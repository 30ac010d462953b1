"""
Name: Update User Use Case

Responsibilities:
  - Replace the profile fields of a user record (whole-record write)
  - Re-hash the password when a new one is supplied
  - Keep the reputation owned by the ledger: carried over for vendors,
    attached empty when a user becomes a vendor, dropped otherwise

Collaborators:
  - domain.repositories.UserRepository
  - domain.services.CredentialVerifier

Error Mapping:
  - VALIDATION_ERROR: empty email/username, unknown role
  - NOT_FOUND: no such user
  - CONFLICT: email taken in the target partition, or the record changed
    since expected_version
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from uuid import UUID

from ...crosscutting.exceptions import DuplicateEmailError
from ...crosscutting.logger import logger
from ...domain.entities import UserRole, VendorDetails, normalize_email
from ...domain.repositories import UserRepository
from ...domain.services import CredentialVerifier
from .user_results import UserResult, conflict, not_found, validation_error


@dataclass(frozen=True)
class UpdateUserInput:
    email: str
    username: str
    role: UserRole | str
    is_approved: bool
    address: str | None = None
    mobile_number: str | None = None
    password: str | None = None
    expected_version: int | None = None


class UpdateUserUseCase:
    """R: Overwrite a user's profile."""

    def __init__(self, repository: UserRepository, verifier: CredentialVerifier):
        self._users = repository
        self._verifier = verifier

    def execute(self, user_id: UUID, input_data: UpdateUserInput) -> UserResult:
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

        current = self._users.get_user_by_id(user_id)
        if current is None:
            return not_found("User not found.")

        if role == UserRole.VENDOR:
            vendor_details = current.vendor_details or VendorDetails()
        else:
            vendor_details = None

        password_hash = current.password_hash
        if input_data.password:
            password_hash = self._verifier.hash(input_data.password)

        expected_version = (
            input_data.expected_version
            if input_data.expected_version is not None
            else current.version
        )
        updated = replace(
            current,
            email=email,
            username=username,
            password_hash=password_hash,
            role=role,
            is_approved=bool(input_data.is_approved),
            address=input_data.address,
            mobile_number=input_data.mobile_number,
            vendor_details=vendor_details,
        )

        try:
            modified = self._users.replace_user(updated, expected_version=expected_version)
        except DuplicateEmailError:
            return conflict("Email already in use.")

        if not modified:
            if self._users.get_user_by_id(user_id) is None:
                return not_found("User not found.")
            return conflict("User was modified concurrently.")

        logger.info("User updated", extra={"user_id": str(user_id)})
        return UserResult(user=replace(updated, version=expected_version + 1))
