"""
Name: Vendor Reputation Write Cycle

Responsibilities:
  - Run read vendor -> mutate reputation -> versioned replace
  - Retry the whole cycle when a concurrent writer bumped the version

Collaborators:
  - domain.repositories.UserRepository (get_user_by_id, replace_user)
  - add_vendor_comment / update_vendor_comment use cases

Notes:
  - The mutation receives the reputation just read and returns either the new
    VendorDetails or a UserResult carrying an error (nothing is written then).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Union
from uuid import UUID

from ...crosscutting.logger import logger
from ...domain.entities import UserRole, VendorDetails
from ...domain.repositories import UserRepository
from .user_results import UserResult, conflict, not_found

ReputationMutation = Callable[[VendorDetails], Union[VendorDetails, UserResult]]


def mutate_vendor_reputation(
    repository: UserRepository,
    vendor_id: UUID,
    mutate: ReputationMutation,
    *,
    max_attempts: int,
) -> UserResult:
    """R: Apply mutate to the vendor's reputation with optimistic concurrency."""
    for attempt in range(1, max_attempts + 1):
        vendor = repository.get_user_by_id(vendor_id, role=UserRole.VENDOR)
        if vendor is None or vendor.vendor_details is None:
            return not_found("Vendor not found.")

        outcome = mutate(vendor.vendor_details)
        if isinstance(outcome, UserResult):
            return outcome

        updated = replace(vendor, vendor_details=outcome)
        if repository.replace_user(updated, expected_version=vendor.version):
            return UserResult(user=replace(updated, version=vendor.version + 1))

        logger.warning(
            "Vendor reputation write lost a race",
            extra={"vendor_id": str(vendor_id), "attempt": attempt},
        )

    if repository.get_user_by_id(vendor_id, role=UserRole.VENDOR) is None:
        return not_found("Vendor not found.")
    return conflict("Vendor reputation changed concurrently.")
