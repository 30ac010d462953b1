"""
Name: In-Memory User Repository Tests

Responsibilities:
  - Partitioned uniqueness on create and replace
  - Version guard and counters returned by writes
  - Field whitelist and role scoping of single-field updates
"""

from dataclasses import replace
from uuid import uuid4

import pytest

from marketplace.crosscutting.exceptions import DuplicateEmailError
from marketplace.domain.entities import Partition, UserRole
from marketplace.infrastructure.repositories import InMemoryUserRepository


pytestmark = pytest.mark.unit


def test_create_sets_version_and_created_at(user_repo, make_user):
    stored = user_repo.create_user(make_user(UserRole.CSR))

    assert stored.version == 1
    assert stored.created_at is not None


def test_create_rejects_email_taken_in_partition(user_repo, make_user):
    user_repo.create_user(make_user(UserRole.VENDOR, email="a@example.com"))

    with pytest.raises(DuplicateEmailError):
        user_repo.create_user(make_user(UserRole.CSR, email="a@example.com"))


def test_create_allows_email_in_other_partition(user_repo, make_user):
    user_repo.create_user(make_user(UserRole.VENDOR, email="a@example.com"))
    customer = user_repo.create_user(make_user(UserRole.CUSTOMER, email="a@example.com"))

    found = user_repo.get_user_by_email_and_partition("a@example.com", Partition.CUSTOMER)
    assert found.id == customer.id


def test_constructor_seeds_users(make_user):
    users = [make_user(UserRole.CSR), make_user(UserRole.CUSTOMER)]

    repo = InMemoryUserRepository(users)

    assert [u.id for u in repo.list_users()] == [u.id for u in users]


def test_get_by_id_with_role_scope(user_repo, make_user):
    vendor = user_repo.create_user(make_user(UserRole.VENDOR))

    assert user_repo.get_user_by_id(vendor.id, role=UserRole.VENDOR) is not None
    assert user_repo.get_user_by_id(vendor.id, role=UserRole.CUSTOMER) is None


def test_replace_bumps_version(user_repo, make_user):
    user = user_repo.create_user(make_user(UserRole.CSR))

    modified = user_repo.replace_user(replace(user, username="new"), expected_version=1)

    stored = user_repo.get_user_by_id(user.id)
    assert modified == 1
    assert stored.username == "new"
    assert stored.version == 2
    assert stored.created_at == user.created_at


def test_replace_with_stale_version_changes_nothing(user_repo, make_user):
    user = user_repo.create_user(make_user(UserRole.CSR))
    user_repo.update_user_field(user.id, "username", "other")

    modified = user_repo.replace_user(replace(user, username="mine"), expected_version=1)

    assert modified == 0
    assert user_repo.get_user_by_id(user.id).username == "other"


def test_replace_missing_user_returns_zero(user_repo, make_user):
    assert user_repo.replace_user(make_user(UserRole.CSR)) == 0


def test_replace_into_taken_email_raises(user_repo, make_user):
    user_repo.create_user(make_user(UserRole.ADMINISTRATOR, email="a@example.com"))
    csr = user_repo.create_user(make_user(UserRole.CSR))

    with pytest.raises(DuplicateEmailError):
        user_repo.replace_user(replace(csr, email="a@example.com"))


def test_update_field_respects_role_scope(user_repo, make_user):
    vendor = user_repo.create_user(make_user(UserRole.VENDOR))

    assert user_repo.update_user_field(
        vendor.id, "is_approved", False, role=UserRole.CUSTOMER
    ) == 0
    assert user_repo.update_user_field(vendor.id, "is_approved", False) == 1
    assert user_repo.get_user_by_id(vendor.id).is_approved is False


def test_update_field_rejects_unknown_field(user_repo, make_user):
    user = user_repo.create_user(make_user(UserRole.CSR))

    with pytest.raises(ValueError):
        user_repo.update_user_field(user.id, "role", UserRole.ADMINISTRATOR)


def test_update_field_on_missing_user_returns_zero(user_repo):
    assert user_repo.update_user_field(uuid4(), "username", "x") == 0


def test_delete_returns_count(user_repo, make_user):
    user = user_repo.create_user(make_user(UserRole.CSR))

    assert user_repo.delete_user(user.id) == 1
    assert user_repo.delete_user(user.id) == 0
