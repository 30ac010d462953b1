"""
Name: Redis Refresh Token Store

Responsibilities:
  - Persist refresh tokens against a user id with a TTL
  - Resolve and revoke tokens

Collaborators:
  - redis-py client
  - identity.tokens.JwtTokenIssuer

Notes:
  - Keys are namespaced with KEY_PREFIX
  - Redis errors propagate; refresh tokens are not optional state
"""

from typing import Optional
from uuid import UUID

import redis


class RedisRefreshTokenStore:
    """R: RefreshTokenStore backed by Redis SETEX."""

    KEY_PREFIX = "marketplace:refresh:"

    def __init__(self, redis_url: str | None = None, client: redis.Redis | None = None):
        if client is None:
            if not redis_url:
                raise ValueError("redis_url or client is required")
            client = redis.from_url(redis_url, decode_responses=True)
        self._client = client

    def _key(self, token: str) -> str:
        return f"{self.KEY_PREFIX}{token}"

    def save(self, token: str, user_id: UUID, ttl_seconds: int) -> None:
        self._client.setex(self._key(token), int(ttl_seconds), str(user_id))

    def get_user_id(self, token: str) -> Optional[UUID]:
        value = self._client.get(self._key(token))
        if value is None:
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return UUID(value)

    def revoke(self, token: str) -> None:
        self._client.delete(self._key(token))
