"""
Name: Argon2 Credential Verifier

Responsibilities:
  - Hash passwords using Argon2
  - Verify a plaintext password against a stored hash
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class Argon2CredentialVerifier:
    """R: CredentialVerifier backed by argon2-cffi."""

    def __init__(self, hasher: PasswordHasher | None = None):
        self._hasher = hasher or PasswordHasher()

    def hash(self, plaintext: str) -> str:
        """R: Hash a password using Argon2."""
        return self._hasher.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        """R: Verify password against stored hash."""
        try:
            return self._hasher.verify(hashed, plaintext)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False
