"""
Name: Domain Repository Interfaces

Responsibilities:
  - Define the user directory contract (single-record CRUD primitives)
  - Keep business logic independent of the storage technology

Collaborators:
  - domain.entities: User, UserRole, Partition
  - Implementations in infrastructure.repositories

Constraints:
  - Pure interfaces (Protocol), no implementation
  - "Not found" is None or a zero count, never an exception
  - Store unavailability raises DatabaseError

Notes:
  - Enables testing with the in-memory directory
"""

from typing import Any, List, Optional, Protocol
from uuid import UUID

from .entities import Partition, User, UserRole


class UserRepository(Protocol):
    """
    R: Interface for the identity directory.

    Implementations must provide:
      - Uniqueness of email within each Partition, enforced by the store
      - A version counter bumped on every replace/update
      - Conditional whole-record replace (compare-and-swap on version)
    """

    def get_user_by_id(
        self, user_id: UUID, *, role: UserRole | None = None
    ) -> Optional[User]:
        """
        R: Exact lookup by id, optionally scoped to a role.

        Returns:
            User or None when no record matches
        """
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        """R: First record with this email, across partitions."""
        ...

    def get_user_by_email_and_partition(
        self, email: str, partition: Partition
    ) -> Optional[User]:
        """R: The (at most one) record holding this email inside a partition."""
        ...

    def list_users(self) -> List[User]:
        """R: All records, oldest first."""
        ...

    def create_user(self, user: User) -> User:
        """
        R: Insert a new record and return it as stored.

        Raises:
            DuplicateEmailError: email already used inside the same partition
        """
        ...

    def replace_user(self, user: User, *, expected_version: int | None = None) -> int:
        """
        R: Overwrite the whole record identified by user.id.

        Args:
            user: New record content (id selects the target)
            expected_version: If given, only write when the stored version
                still matches

        Returns:
            Modified count: 0 when the id is missing or the version moved on

        Raises:
            DuplicateEmailError: new email collides inside its partition
        """
        ...

    def update_user_field(
        self,
        user_id: UUID,
        field: str,
        value: Any,
        *,
        role: UserRole | None = None,
    ) -> int:
        """R: Set one whitelisted field on (id[, role]); returns modified count."""
        ...

    def delete_user(self, user_id: UUID) -> int:
        """R: Hard delete by id; returns deleted count."""
        ...
