"""
Name: Get User Use Case

Responsibilities:
  - Fetch one user by id or by email
"""

from uuid import UUID

from ...domain.entities import normalize_email
from ...domain.repositories import UserRepository
from .user_results import UserResult, not_found


class GetUserUseCase:
    """R: Single-user lookups."""

    def __init__(self, repository: UserRepository):
        self._users = repository

    def by_id(self, user_id: UUID) -> UserResult:
        user = self._users.get_user_by_id(user_id)
        if user is None:
            return not_found("User not found.")
        return UserResult(user=user)

    def by_email(self, email: str) -> UserResult:
        user = self._users.get_user_by_email(normalize_email(email))
        if user is None:
            return not_found("User not found.")
        return UserResult(user=user)
