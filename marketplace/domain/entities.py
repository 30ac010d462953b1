"""
Name: Domain Entities

Responsibilities:
  - Define the user identity record and its role enumeration
  - Define the email uniqueness partition and the single function that maps
    a role onto it
  - Define the vendor reputation sub-entity and keep its aggregate rating
    derived from the current comment set

Collaborators:
  - domain.repositories: persists User records
  - application.usecases: build and mutate entities

Constraints:
  - Entities are immutable; mutations return new instances
  - average_rating is never stored independently of comments
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Iterable
from uuid import UUID


class UserRole(str, Enum):
    """R: Supported marketplace roles."""

    CUSTOMER = "Customer"
    VENDOR = "Vendor"
    ADMINISTRATOR = "Administrator"
    CSR = "CSR"


class Partition(str, Enum):
    """R: Email uniqueness scope. Customers form one partition, staff the other."""

    CUSTOMER = "customer"
    STAFF = "staff"


def partition_of(role: UserRole) -> Partition:
    """R: Map a role onto its email uniqueness partition."""
    if role == UserRole.CUSTOMER:
        return Partition.CUSTOMER
    return Partition.STAFF


def compute_average_rating(comments: Iterable["Comment"]) -> float:
    """R: Arithmetic mean of all ratings; 0.0 when there are no comments."""
    ratings = [comment.rating for comment in comments]
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


@dataclass(frozen=True)
class Comment:
    """R: A rating plus free text attached to a vendor profile."""

    id: UUID
    text: str
    rating: int
    author_id: UUID | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class VendorDetails:
    """
    R: Reputation owned by a Vendor user.

    comments keeps insertion order, which is also display order.
    """

    comments: tuple[Comment, ...] = ()
    average_rating: float = 0.0

    @property
    def comment_ids(self) -> set[UUID]:
        return {comment.id for comment in self.comments}

    def find_comment(self, comment_id: UUID) -> Comment | None:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def with_comment(self, comment: Comment) -> VendorDetails:
        """R: Append a comment and recompute the aggregate from the full set."""
        if comment.id in self.comment_ids:
            raise ValueError(f"Duplicate comment id: {comment.id}")
        comments = self.comments + (comment,)
        return VendorDetails(
            comments=comments,
            average_rating=compute_average_rating(comments),
        )

    def with_comment_text(self, comment_id: UUID, text: str) -> VendorDetails | None:
        """
        R: Replace the text of one comment, keeping its rating.

        Returns None when the comment does not exist. The aggregate is still
        recomputed from the full set.
        """
        if self.find_comment(comment_id) is None:
            return None
        comments = tuple(
            replace(comment, text=text) if comment.id == comment_id else comment
            for comment in self.comments
        )
        return VendorDetails(
            comments=comments,
            average_rating=compute_average_rating(comments),
        )


@dataclass(frozen=True)
class User:
    """R: Identity record owned by the user directory."""

    id: UUID
    email: str
    username: str
    password_hash: str
    role: UserRole
    is_approved: bool
    address: str | None = None
    mobile_number: str | None = None
    vendor_details: VendorDetails | None = None
    version: int = 1
    created_at: datetime | None = field(default=None, compare=False)

    @property
    def partition(self) -> Partition:
        return partition_of(self.role)

    @property
    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER

    @property
    def is_administrator(self) -> bool:
        return self.role == UserRole.ADMINISTRATOR


def default_approval(role: UserRole) -> bool:
    """R: New customers wait for approval; every other role starts approved."""
    return role != UserRole.CUSTOMER


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()
