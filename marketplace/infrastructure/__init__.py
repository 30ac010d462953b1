"""Infrastructure adapters (Postgres, Redis, RQ, in-memory)."""
