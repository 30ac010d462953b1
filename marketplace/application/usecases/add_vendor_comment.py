"""
Name: Add Vendor Comment Use Case

Responsibilities:
  - Validate the rating bound
  - Append a comment with a fresh id to a vendor's reputation
  - Recompute the average rating from the full post-append set

Collaborators:
  - vendor_reputation.mutate_vendor_reputation
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID, uuid4

from ...crosscutting.logger import logger
from ...domain.entities import Comment, VendorDetails
from ...domain.repositories import UserRepository
from .user_results import UserResult, validation_error
from .vendor_reputation import mutate_vendor_reputation


@dataclass(frozen=True)
class AddCommentInput:
    text: str
    rating: int
    author_id: UUID | None = None


class AddVendorCommentUseCase:
    """R: Attach a rating/comment to a vendor profile."""

    def __init__(
        self,
        repository: UserRepository,
        *,
        min_rating: int = 1,
        max_rating: int = 5,
        max_attempts: int = 3,
    ) -> None:
        self._users = repository
        self._min_rating = min_rating
        self._max_rating = max_rating
        self._max_attempts = max_attempts

    def execute(self, vendor_id: UUID, input_data: AddCommentInput) -> UserResult:
        rating = input_data.rating
        if isinstance(rating, bool) or not isinstance(rating, int):
            return validation_error("Rating must be an integer.")
        if not self._min_rating <= rating <= self._max_rating:
            return validation_error(
                f"Rating must be between {self._min_rating} and {self._max_rating}."
            )

        def append(details: VendorDetails) -> VendorDetails:
            comment_id = uuid4()
            while comment_id in details.comment_ids:
                comment_id = uuid4()
            return details.with_comment(
                Comment(
                    id=comment_id,
                    text=input_data.text or "",
                    rating=rating,
                    author_id=input_data.author_id,
                    created_at=datetime.now(timezone.utc),
                )
            )

        result = mutate_vendor_reputation(
            self._users, vendor_id, append, max_attempts=self._max_attempts
        )
        if result.user is not None:
            logger.info(
                "Vendor comment added",
                extra={
                    "vendor_id": str(vendor_id),
                    "average_rating": result.user.vendor_details.average_rating,
                },
            )
        return result
