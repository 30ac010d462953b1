"""
Name: List Users Use Case

Responsibilities:
  - Return every user record (no pagination)
"""

from ...domain.repositories import UserRepository
from .user_results import UserListResult


class ListUsersUseCase:
    """R: List all users."""

    def __init__(self, repository: UserRepository):
        self._users = repository

    def execute(self) -> UserListResult:
        return UserListResult(users=self._users.list_users())
