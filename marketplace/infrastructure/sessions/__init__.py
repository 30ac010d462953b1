"""Refresh token stores."""

from .in_memory_refresh_store import InMemoryRefreshTokenStore
from .redis_refresh_store import RedisRefreshTokenStore

__all__ = ["InMemoryRefreshTokenStore", "RedisRefreshTokenStore"]
