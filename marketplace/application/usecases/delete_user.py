"""
Name: Delete User Use Case

Responsibilities:
  - Hard-delete a user by id
"""

from uuid import UUID

from ...crosscutting.logger import logger
from ...domain.repositories import UserRepository
from .user_results import DeleteUserResult, UserError, UserErrorCode


class DeleteUserUseCase:
    """R: Remove a user record."""

    def __init__(self, repository: UserRepository):
        self._users = repository

    def execute(self, user_id: UUID) -> DeleteUserResult:
        deleted = self._users.delete_user(user_id)
        if not deleted:
            return DeleteUserResult(
                deleted=False,
                error=UserError(code=UserErrorCode.NOT_FOUND, message="User not found."),
            )
        logger.info("User deleted", extra={"user_id": str(user_id)})
        return DeleteUserResult(deleted=True)
