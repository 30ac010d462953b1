"""
Name: Repository Implementations (package exports)

Responsibilities:
  - Expose concrete identity directory implementations from one import point
"""

# In-memory: unit tests and STORAGE_BACKEND=memory. Not persisted.
from .in_memory_user_repo import InMemoryUserRepository

# Postgres: production persistence.
from .postgres_user_repo import PostgresUserRepository

__all__ = [
    "InMemoryUserRepository",
    "PostgresUserRepository",
]
