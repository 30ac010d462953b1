"""Domain layer: entities and ports."""

from .entities import (
    Comment,
    Partition,
    User,
    UserRole,
    VendorDetails,
    compute_average_rating,
    default_approval,
    normalize_email,
    partition_of,
)
from .repositories import UserRepository
from .services import (
    ApprovalNotifier,
    CredentialVerifier,
    RefreshTokenStore,
    TokenIssuer,
)

__all__ = [
    "Comment",
    "Partition",
    "User",
    "UserRole",
    "VendorDetails",
    "compute_average_rating",
    "default_approval",
    "normalize_email",
    "partition_of",
    "UserRepository",
    "ApprovalNotifier",
    "CredentialVerifier",
    "RefreshTokenStore",
    "TokenIssuer",
]
