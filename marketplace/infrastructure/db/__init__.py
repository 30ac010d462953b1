"""Database connection management."""

from .pool import close_pool, get_pool, init_pool, reset_pool

__all__ = ["close_pool", "get_pool", "init_pool", "reset_pool"]
