"""
Name: Domain Entity Tests

Responsibilities:
  - Role to partition mapping
  - Average rating derivation on append and text edit
  - Approval defaults and email normalization
"""

from uuid import uuid4

import pytest

from marketplace.domain.entities import (
    Comment,
    Partition,
    UserRole,
    VendorDetails,
    compute_average_rating,
    default_approval,
    normalize_email,
    partition_of,
)


pytestmark = pytest.mark.unit


def _comment(rating: int, text: str = "ok") -> Comment:
    return Comment(id=uuid4(), text=text, rating=rating)


@pytest.mark.parametrize(
    "role, expected",
    [
        (UserRole.CUSTOMER, Partition.CUSTOMER),
        (UserRole.VENDOR, Partition.STAFF),
        (UserRole.ADMINISTRATOR, Partition.STAFF),
        (UserRole.CSR, Partition.STAFF),
    ],
)
def test_partition_of_role(role, expected):
    assert partition_of(role) == expected


def test_role_values_match_wire_names():
    assert [role.value for role in UserRole] == [
        "Customer",
        "Vendor",
        "Administrator",
        "CSR",
    ]


def test_only_customers_start_unapproved():
    assert default_approval(UserRole.CUSTOMER) is False
    assert default_approval(UserRole.VENDOR) is True
    assert default_approval(UserRole.ADMINISTRATOR) is True
    assert default_approval(UserRole.CSR) is True


def test_average_of_no_comments_is_zero():
    assert compute_average_rating([]) == 0.0
    assert VendorDetails().average_rating == 0.0


def test_with_comment_recomputes_average_from_full_set():
    details = VendorDetails().with_comment(_comment(4)).with_comment(_comment(2))

    assert len(details.comments) == 2
    assert details.average_rating == 3.0


def test_with_comment_keeps_insertion_order():
    first, second = _comment(5, "first"), _comment(1, "second")

    details = VendorDetails().with_comment(first).with_comment(second)

    assert [c.text for c in details.comments] == ["first", "second"]


def test_with_comment_rejects_duplicate_id():
    comment = _comment(3)
    details = VendorDetails().with_comment(comment)

    with pytest.raises(ValueError):
        details.with_comment(comment)


def test_with_comment_text_keeps_rating_and_average():
    target = _comment(5, "old")
    details = VendorDetails().with_comment(target).with_comment(_comment(3))

    edited = details.with_comment_text(target.id, "new")

    assert edited is not None
    assert edited.find_comment(target.id).text == "new"
    assert edited.find_comment(target.id).rating == 5
    assert edited.average_rating == 4.0


def test_with_comment_text_unknown_id_returns_none():
    details = VendorDetails().with_comment(_comment(3))

    assert details.with_comment_text(uuid4(), "nope") is None


def test_vendor_details_is_immutable():
    details = VendorDetails()
    details.with_comment(_comment(5))

    assert details.comments == ()


def test_user_role_helpers(make_user):
    customer = make_user(UserRole.CUSTOMER)
    admin = make_user(UserRole.ADMINISTRATOR)

    assert customer.is_customer and not customer.is_administrator
    assert admin.is_administrator and admin.partition == Partition.STAFF


def test_normalize_email_strips_and_lowercases():
    assert normalize_email("  Alice@Example.COM ") == "alice@example.com"
    assert normalize_email(None) == ""
