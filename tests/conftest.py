"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment before the package reads settings
  - Provide in-memory collaborators for use case tests
  - Provide user factories for each role

Collaborators:
  - marketplace.infrastructure: in-memory repository and refresh store
  - marketplace.identity.tokens: real JWT issuer with a test secret

Notes:
  - Password hashing is replaced by a transparent fake so unit tests stay
    fast; Argon2 itself is covered in tests/unit/identity.
"""

import os
import sys
from pathlib import Path
from typing import List
from uuid import uuid4

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from marketplace.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from marketplace.domain.entities import (  # noqa: E402
    User,
    UserRole,
    VendorDetails,
    default_approval,
)
from marketplace.identity.tokens import JwtTokenIssuer, TokenSettings  # noqa: E402
from marketplace.infrastructure.repositories import InMemoryUserRepository  # noqa: E402
from marketplace.infrastructure.sessions import InMemoryRefreshTokenStore  # noqa: E402

os.environ.setdefault("APP_ENV", "test")

TEST_JWT_SECRET = "test-secret-with-enough-bytes-for-hs256"


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require Postgres)"
    )


# ============================================================================
# Fake Services
# ============================================================================


class FakeCredentialVerifier:
    """R: Reversible 'hash' so tests can assert on stored values."""

    PREFIX = "fake$"

    def hash(self, plaintext: str) -> str:
        return f"{self.PREFIX}{plaintext}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        return hashed == f"{self.PREFIX}{plaintext}"


class RecordingApprovalNotifier:
    """R: Remembers every user it was asked to announce."""

    def __init__(self, fail: bool = False) -> None:
        self.notified: List[User] = []
        self._fail = fail

    def notify(self, user: User) -> None:
        if self._fail:
            raise ConnectionError("queue unavailable")
        self.notified.append(user)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def verifier() -> FakeCredentialVerifier:
    return FakeCredentialVerifier()


@pytest.fixture
def notifier() -> RecordingApprovalNotifier:
    return RecordingApprovalNotifier()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def refresh_store() -> InMemoryRefreshTokenStore:
    return InMemoryRefreshTokenStore()


@pytest.fixture
def token_settings() -> TokenSettings:
    return TokenSettings(
        jwt_secret=TEST_JWT_SECRET,
        jwt_access_ttl_minutes=30,
        refresh_token_ttl_days=7,
    )


@pytest.fixture
def token_issuer(token_settings, refresh_store) -> JwtTokenIssuer:
    return JwtTokenIssuer(token_settings, refresh_store)


@pytest.fixture
def make_user(verifier):
    """R: Factory for users of any role, stored hash matches the fake verifier."""

    def _make(
        role: UserRole = UserRole.CUSTOMER,
        *,
        email: str | None = None,
        username: str = "someone",
        password: str = "correct-horse",
        is_approved: bool | None = None,
    ) -> User:
        return User(
            id=uuid4(),
            email=email or f"{uuid4().hex[:8]}@example.com",
            username=username,
            password_hash=verifier.hash(password),
            role=role,
            is_approved=(
                default_approval(role) if is_approved is None else is_approved
            ),
            vendor_details=VendorDetails() if role == UserRole.VENDOR else None,
        )

    return _make


@pytest.fixture
def failing_notifier() -> RecordingApprovalNotifier:
    return RecordingApprovalNotifier(fail=True)
