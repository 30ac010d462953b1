"""
Name: User Use Case Results

Responsibilities:
  - Shared result and error models for identity and reputation use cases

Notes:
  - Use cases return typed results instead of raising for expected outcomes
    (missing record, duplicate email, bad credentials).
  - If error is None the payload is present; otherwise it should be None.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ...domain.entities import User


class UserErrorCode(str, Enum):
    """
    Error categories for user use cases.

      - VALIDATION_ERROR: malformed input (unknown role, rating out of range)
      - NOT_FOUND: user, vendor or comment does not exist
      - CONFLICT: registration rejected or lost update after retries
      - AUTH_FAILED: credentials rejected (never says which check failed)
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    AUTH_FAILED = "AUTH_FAILED"


@dataclass(frozen=True)
class UserError:
    code: UserErrorCode
    message: str


@dataclass
class UserResult:
    """Result for use cases that return a single user."""

    user: User | None = None
    error: UserError | None = None


@dataclass
class UserListResult:
    users: List[User] = field(default_factory=list)
    error: UserError | None = None


@dataclass
class AuthResult:
    """Result of a login: the user plus both tokens, or AUTH_FAILED."""

    user: User | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    error: UserError | None = None


@dataclass
class ApprovalResult:
    """modified is True iff exactly one customer record changed."""

    modified: bool


@dataclass
class DeleteUserResult:
    deleted: bool
    error: UserError | None = None


def not_found(message: str) -> UserResult:
    return UserResult(error=UserError(code=UserErrorCode.NOT_FOUND, message=message))


def validation_error(message: str) -> UserResult:
    return UserResult(
        error=UserError(code=UserErrorCode.VALIDATION_ERROR, message=message)
    )


def conflict(message: str) -> UserResult:
    return UserResult(error=UserError(code=UserErrorCode.CONFLICT, message=message))
