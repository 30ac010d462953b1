"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - container.py: reads settings to wire repositories, services and use cases
  - worker/worker.py: reads Redis and queue settings
  - infrastructure/db/pool.py: reads statement timeout

Constraints:
  - No business logic, pure configuration

Notes:
  - Singleton via lru_cache
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "dev-secret"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_url: PostgreSQL connection string
        app_env: Application environment (development/test/production)
        storage_backend: "postgres" or "memory"
        redis_url: Redis URL for refresh tokens and the approval queue
        approval_queue_name: RQ queue that receives approval notifications
        approval_notifier: "rq" or "log"
        jwt_secret: Secret for signing JWT access tokens
        jwt_access_ttl_minutes: Access token TTL in minutes
        refresh_token_ttl_days: Refresh token TTL in days
        min_password_length: Minimum accepted password length on registration
        min_rating / max_rating: Inclusive bounds for comment ratings
        max_update_attempts: Retries for versioned read-modify-write cycles
        require_customer_approval: Refuse login for unapproved customers
    """

    # Required (no defaults)
    database_url: str

    app_env: str = "development"
    storage_backend: str = "postgres"

    # Redis / RQ
    redis_url: str = "redis://localhost:6379/0"
    approval_queue_name: str = "customer-approvals"
    approval_notifier: str = "rq"
    approval_retry_max_attempts: int = 3

    # Security - JWT Auth
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_access_ttl_minutes: int = 30
    refresh_token_ttl_days: int = 7
    min_password_length: int = 8
    require_customer_approval: bool = False

    # Reputation
    min_rating: int = 1
    max_rating: int = 5
    max_update_attempts: int = 3

    # Database - Connection Pool
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000

    @field_validator(
        "jwt_access_ttl_minutes",
        "refresh_token_ttl_days",
        "max_update_attempts",
        "approval_retry_max_attempts",
    )
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @field_validator("storage_backend")
    @classmethod
    def storage_backend_supported(cls, v: str) -> str:
        normalized = v.strip().lower()
        if normalized not in {"postgres", "memory"}:
            raise ValueError("storage_backend must be 'postgres' or 'memory'")
        return normalized

    @field_validator("approval_notifier")
    @classmethod
    def approval_notifier_supported(cls, v: str) -> str:
        normalized = v.strip().lower()
        if normalized not in {"rq", "log"}:
            raise ValueError("approval_notifier must be 'rq' or 'log'")
        return normalized

    @model_validator(mode="after")
    def validate_cross_fields(self):
        if self.min_rating > self.max_rating:
            raise ValueError(
                f"min_rating ({self.min_rating}) must be <= max_rating ({self.max_rating})"
            )
        if self.is_production() and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set in production")
        return self

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If required env vars are missing or invalid
    """
    return Settings()
