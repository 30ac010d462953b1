"""
Name: Check Administrator Use Case

Responsibilities:
  - Answer "is this user in the Administrator role"
"""

from uuid import UUID

from ...domain.repositories import UserRepository


class CheckAdministratorUseCase:
    """R: Binary administrator check; unknown ids are not administrators."""

    def __init__(self, repository: UserRepository):
        self._users = repository

    def execute(self, user_id: UUID) -> bool:
        user = self._users.get_user_by_id(user_id)
        return user is not None and user.is_administrator
