"""
Name: Approve Customer Use Case

Responsibilities:
  - Set is_approved on a Customer record (either direction)

Collaborators:
  - domain.repositories.UserRepository

Notes:
  - Missing ids and non-customer ids are a "not modified" outcome, not an error.
"""

from uuid import UUID

from ...crosscutting.logger import logger
from ...domain.entities import UserRole
from ...domain.repositories import UserRepository
from .user_results import ApprovalResult


class ApproveCustomerUseCase:
    """R: Flip the approval gate of one customer account."""

    def __init__(self, repository: UserRepository):
        self._users = repository

    def execute(self, customer_id: UUID, is_approved: bool) -> ApprovalResult:
        modified = self._users.update_user_field(
            customer_id,
            "is_approved",
            bool(is_approved),
            role=UserRole.CUSTOMER,
        )
        logger.info(
            "Customer approval updated",
            extra={
                "user_id": str(customer_id),
                "is_approved": bool(is_approved),
                "modified": modified,
            },
        )
        return ApprovalResult(modified=modified == 1)
