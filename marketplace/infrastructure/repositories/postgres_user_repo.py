"""
Name: PostgreSQL User Repository

Responsibilities:
  - Load users by id, email, or (email, partition)
  - Insert, replace (versioned), update single fields, and delete users
  - Map database rows into User records; reputation lives in a JSONB column
  - Translate the (email, is_customer) unique violation into DuplicateEmailError

Collaborators:
  - psycopg_pool.ConnectionPool (infrastructure.db.pool)
  - domain.entities: User, UserRole, VendorDetails, Comment

Constraints:
  - SQL is always parametrized
  - Returns None / 0 when the record does not exist
  - Every other failure is logged and raised as DatabaseError
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, List, Optional
from uuid import UUID

from psycopg import errors as pg_errors
from psycopg.types.json import Json
from psycopg_pool import ConnectionPool

from ...crosscutting.exceptions import DatabaseError, DuplicateEmailError
from ...crosscutting.logger import logger
from ...domain.entities import (
    Comment,
    Partition,
    User,
    UserRole,
    VendorDetails,
    partition_of,
)

_USER_COLUMNS = (
    "id, email, username, password_hash, role, is_approved, "
    "address, mobile_number, vendor_details, version, created_at"
)
_USER_ORDER_BY = "created_at ASC, id ASC"

# R: Column whitelist for update_user_field (never interpolate caller input)
UPDATABLE_FIELDS = frozenset({"is_approved", "username", "address", "mobile_number"})

_EMAIL_PARTITION_CONSTRAINT = "uq_users_email_partition"


def _vendor_details_to_json(details: VendorDetails | None) -> Json | None:
    if details is None:
        return None
    return Json(
        {
            "average_rating": details.average_rating,
            "comments": [
                {
                    "id": str(comment.id),
                    "text": comment.text,
                    "rating": comment.rating,
                    "author_id": str(comment.author_id) if comment.author_id else None,
                    "created_at": (
                        comment.created_at.isoformat() if comment.created_at else None
                    ),
                }
                for comment in details.comments
            ],
        }
    )


def _vendor_details_from_json(data: dict | None) -> VendorDetails | None:
    if data is None:
        return None
    comments = tuple(
        Comment(
            id=UUID(item["id"]),
            text=item.get("text", ""),
            rating=item["rating"],
            author_id=UUID(item["author_id"]) if item.get("author_id") else None,
            created_at=(
                datetime.fromisoformat(item["created_at"])
                if item.get("created_at")
                else None
            ),
        )
        for item in data.get("comments", [])
    )
    return VendorDetails(
        comments=comments,
        average_rating=float(data.get("average_rating", 0.0)),
    )


def _row_to_user(row: tuple) -> User:
    try:
        role = UserRole(row[4])
    except ValueError as exc:
        raise DatabaseError(f"Invalid user role in database: {row[4]}") from exc

    return User(
        id=row[0],
        email=row[1],
        username=row[2],
        password_hash=row[3],
        role=role,
        is_approved=row[5],
        address=row[6],
        mobile_number=row[7],
        vendor_details=_vendor_details_from_json(row[8]),
        version=row[9],
        created_at=row[10],
    )


class PostgresUserRepository:
    """R: Identity directory persisted in the `users` table."""

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool
        from ..db.pool import get_pool

        return get_pool()

    # =========================================================
    # Execution helpers
    # =========================================================
    def _fetchone(
        self, query: str, params: Iterable[object], log_msg: str, log_extra: dict
    ) -> tuple | None:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc

    def _fetchall(
        self, query: str, params: Iterable[object], log_msg: str, log_extra: dict
    ) -> list[tuple]:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc

    def _write(
        self,
        query: str,
        params: Iterable[object],
        log_msg: str,
        log_extra: dict,
        *,
        returning: bool = False,
    ) -> Any:
        """R: Run a write statement; returns its rowcount, or the row if returning."""
        try:
            with self._get_pool().connection() as conn:
                cursor = conn.execute(query, tuple(params))
                return cursor.fetchone() if returning else cursor.rowcount
        except pg_errors.UniqueViolation as exc:
            constraint = getattr(exc.diag, "constraint_name", None)
            if constraint == _EMAIL_PARTITION_CONSTRAINT:
                logger.info("Email already taken in partition", extra=log_extra)
                raise DuplicateEmailError(
                    "Email already registered in this partition.", original_error=exc
                ) from exc
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc

    # =========================================================
    # Reads
    # =========================================================
    def get_user_by_id(
        self, user_id: UUID, *, role: UserRole | None = None
    ) -> Optional[User]:
        query = f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s"
        params: list[object] = [user_id]
        if role is not None:
            query += " AND role = %s"
            params.append(role.value)
        row = self._fetchone(
            query,
            params,
            "PostgresUserRepository: get_user_by_id failed",
            {"user_id": str(user_id)},
        )
        return _row_to_user(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        row = self._fetchone(
            f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE email = %s
            ORDER BY {_USER_ORDER_BY}
            LIMIT 1
            """,
            (email,),
            "PostgresUserRepository: get_user_by_email failed",
            {"email": email},
        )
        return _row_to_user(row) if row else None

    def get_user_by_email_and_partition(
        self, email: str, partition: Partition
    ) -> Optional[User]:
        row = self._fetchone(
            f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE email = %s AND is_customer = %s
            """,
            (email, partition == Partition.CUSTOMER),
            "PostgresUserRepository: get_user_by_email_and_partition failed",
            {"email": email, "partition": partition.value},
        )
        return _row_to_user(row) if row else None

    def list_users(self) -> List[User]:
        rows = self._fetchall(
            f"SELECT {_USER_COLUMNS} FROM users ORDER BY {_USER_ORDER_BY}",
            (),
            "PostgresUserRepository: list_users failed",
            {},
        )
        return [_row_to_user(row) for row in rows]

    # =========================================================
    # Writes
    # =========================================================
    def create_user(self, user: User) -> User:
        row = self._write(
            f"""
            INSERT INTO users (
                id, email, username, password_hash, role, is_approved,
                address, mobile_number, vendor_details, version
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, 1)
            RETURNING {_USER_COLUMNS}
            """,
            (
                user.id,
                user.email,
                user.username,
                user.password_hash,
                user.role.value,
                user.is_approved,
                user.address,
                user.mobile_number,
                _vendor_details_to_json(user.vendor_details),
            ),
            "PostgresUserRepository: create_user failed",
            {
                "user_id": str(user.id),
                "role": user.role.value,
                "partition": partition_of(user.role).value,
            },
            returning=True,
        )
        if not row:
            raise DatabaseError("PostgresUserRepository: create_user returned no row")
        return _row_to_user(row)

    def replace_user(self, user: User, *, expected_version: int | None = None) -> int:
        query = """
            UPDATE users
            SET email = %s,
                username = %s,
                password_hash = %s,
                role = %s,
                is_approved = %s,
                address = %s,
                mobile_number = %s,
                vendor_details = %s,
                version = version + 1
            WHERE id = %s
        """
        params: list[object] = [
            user.email,
            user.username,
            user.password_hash,
            user.role.value,
            user.is_approved,
            user.address,
            user.mobile_number,
            _vendor_details_to_json(user.vendor_details),
            user.id,
        ]
        if expected_version is not None:
            query += " AND version = %s"
            params.append(expected_version)

        return self._write(
            query,
            params,
            "PostgresUserRepository: replace_user failed",
            {"user_id": str(user.id), "expected_version": expected_version},
        )

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

        # field is whitelisted above
        query = f"UPDATE users SET {field} = %s, version = version + 1 WHERE id = %s"
        params: list[object] = [value, user_id]
        if role is not None:
            query += " AND role = %s"
            params.append(role.value)

        return self._write(
            query,
            params,
            "PostgresUserRepository: update_user_field failed",
            {"user_id": str(user_id), "field": field},
        )

    def delete_user(self, user_id: UUID) -> int:
        return self._write(
            "DELETE FROM users WHERE id = %s",
            (user_id,),
            "PostgresUserRepository: delete_user failed",
            {"user_id": str(user_id)},
        )
