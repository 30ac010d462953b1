"""
Name: Update Vendor Comment Use Case

Responsibilities:
  - Replace the text of one comment on a vendor profile
  - Recompute the average rating from the full set

Notes:
  - The rating of an existing comment is not editable here.
"""

from __future__ import annotations

from uuid import UUID

from ...crosscutting.logger import logger
from ...domain.entities import VendorDetails
from ...domain.repositories import UserRepository
from .user_results import UserResult, not_found
from .vendor_reputation import mutate_vendor_reputation


class UpdateVendorCommentUseCase:
    """R: Edit the text of an existing vendor comment."""

    def __init__(self, repository: UserRepository, *, max_attempts: int = 3) -> None:
        self._users = repository
        self._max_attempts = max_attempts

    def execute(self, vendor_id: UUID, comment_id: UUID, text: str) -> UserResult:
        def edit(details: VendorDetails) -> VendorDetails | UserResult:
            updated = details.with_comment_text(comment_id, text or "")
            if updated is None:
                return not_found("Comment not found.")
            return updated

        result = mutate_vendor_reputation(
            self._users, vendor_id, edit, max_attempts=self._max_attempts
        )
        if result.user is not None:
            logger.info(
                "Vendor comment updated",
                extra={"vendor_id": str(vendor_id), "comment_id": str(comment_id)},
            )
        return result
