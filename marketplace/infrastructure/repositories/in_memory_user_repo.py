"""
Name: In-Memory User Repository

Responsibilities:
  - Store users in memory (tests / local dev)
  - Enforce email uniqueness per partition, like the Postgres constraint
  - Apply the same versioned replace semantics as the Postgres directory

Collaborators:
  - domain.entities: User, UserRole, Partition
  - domain.repositories.UserRepository (contract to implement)

Constraints:
  - Thread-safe: every primitive runs under one Lock
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...crosscutting.exceptions import DuplicateEmailError
from ...domain.entities import Partition, User, UserRole, partition_of

UPDATABLE_FIELDS = frozenset({"is_approved", "username", "address", "mobile_number"})


class InMemoryUserRepository:
    """R: Thread-safe in-memory identity directory."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._lock = Lock()
        self._users: Dict[UUID, User] = {}
        for user in users or []:
            self.create_user(user)

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _find_in_partition(
        self, email: str, partition: Partition, *, exclude_id: UUID | None = None
    ) -> Optional[User]:
        for user in self._users.values():
            if user.id == exclude_id:
                continue
            if user.email == email and partition_of(user.role) == partition:
                return user
        return None

    # =========================================================
    # Reads
    # =========================================================
    def get_user_by_id(
        self, user_id: UUID, *, role: UserRole | None = None
    ) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            return None
        if role is not None and user.role != role:
            return None
        return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
        return None

    def get_user_by_email_and_partition(
        self, email: str, partition: Partition
    ) -> Optional[User]:
        with self._lock:
            return self._find_in_partition(email, partition)

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    # =========================================================
    # Writes
    # =========================================================
    def create_user(self, user: User) -> User:
        with self._lock:
            if self._find_in_partition(user.email, partition_of(user.role)):
                raise DuplicateEmailError(
                    "Email already registered in this partition."
                )
            stored = replace(user, version=1, created_at=user.created_at or self._now())
            self._users[stored.id] = stored
            return stored

    def replace_user(self, user: User, *, expected_version: int | None = None) -> int:
        with self._lock:
            current = self._users.get(user.id)
            if current is None:
                return 0
            if expected_version is not None and current.version != expected_version:
                return 0
            if self._find_in_partition(
                user.email, partition_of(user.role), exclude_id=user.id
            ):
                raise DuplicateEmailError(
                    "Email already registered in this partition."
                )
            self._users[user.id] = replace(
                user,
                version=current.version + 1,
                created_at=current.created_at,
            )
            return 1

    def update_user_field(
        self,
        user_id: UUID,
        field: str,
        value: Any,
        *,
        role: UserRole | None = None,
    ) -> int:
        if field not in UPDATABLE_FIELDS:
            raise ValueError(f"Field is not updatable: {field}")
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return 0
            if role is not None and current.role != role:
                return 0
            self._users[user_id] = replace(
                current, **{field: value}, version=current.version + 1
            )
            return 1

    def delete_user(self, user_id: UUID) -> int:
        with self._lock:
            return 1 if self._users.pop(user_id, None) is not None else 0
