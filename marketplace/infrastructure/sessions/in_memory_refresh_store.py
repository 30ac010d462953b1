"""
Name: In-Memory Refresh Token Store

Responsibilities:
  - Thread-safe refresh token storage for tests and local runs
  - Drop expired tokens on every save so the dict stays bounded by live tokens
"""

import time
from threading import Lock
from typing import Dict, Optional, Tuple
from uuid import UUID


class InMemoryRefreshTokenStore:
    """R: RefreshTokenStore kept in a dict with expiry timestamps."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._tokens: Dict[str, Tuple[UUID, float]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def _evict_expired(self, now: float) -> None:
        expired = [
            token
            for token, (_, expires_at) in self._tokens.items()
            if now >= expires_at
        ]
        for token in expired:
            del self._tokens[token]

    def save(self, token: str, user_id: UUID, ttl_seconds: int) -> None:
        now = time.time()
        with self._lock:
            self._evict_expired(now)
            self._tokens[token] = (user_id, now + ttl_seconds)

    def get_user_id(self, token: str) -> Optional[UUID]:
        with self._lock:
            entry = self._tokens.get(token)
            if entry is None:
                return None
            user_id, expires_at = entry
            if time.time() >= expires_at:
                del self._tokens[token]
                return None
            return user_id

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)
