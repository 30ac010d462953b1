"""
Name: Dependency Injection Container

Responsibilities:
  - Wire settings, repositories and collaborators into use cases
  - Manage singleton instances of repositories and services

Constraints:
  - Manual DI (no library like dependency-injector)
  - Singletons via functools.lru_cache

Notes:
  - This is the composition root; use cases never import concrete adapters
  - STORAGE_BACKEND=memory keeps everything in-process (tests, local dev)
"""

from functools import lru_cache

from .application.usecases import (
    AddVendorCommentUseCase,
    ApproveCustomerUseCase,
    AuthenticateUserUseCase,
    CheckAdministratorUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
    UpdateVendorCommentUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import UserRepository
from .domain.services import (
    ApprovalNotifier,
    CredentialVerifier,
    RefreshTokenStore,
    TokenIssuer,
)
from .identity.passwords import Argon2CredentialVerifier
from .identity.tokens import JwtTokenIssuer, TokenSettings
from .infrastructure.db.pool import close_pool, init_pool
from .infrastructure.notifications import LoggingApprovalNotifier, RQApprovalNotifier
from .infrastructure.repositories import InMemoryUserRepository, PostgresUserRepository
from .infrastructure.sessions import InMemoryRefreshTokenStore, RedisRefreshTokenStore


def _in_memory() -> bool:
    return get_settings().storage_backend == "memory"


# R: Repository factory (singleton)
@lru_cache
def get_user_repository() -> UserRepository:
    """
    R: Get singleton instance of the identity directory.

    Returns:
        Postgres or in-memory implementation of UserRepository
    """
    if _in_memory():
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache
def get_credential_verifier() -> CredentialVerifier:
    return Argon2CredentialVerifier()


@lru_cache
def get_refresh_token_store() -> RefreshTokenStore:
    if _in_memory():
        return InMemoryRefreshTokenStore()
    return RedisRefreshTokenStore(redis_url=get_settings().redis_url)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return JwtTokenIssuer(
        TokenSettings(
            jwt_secret=settings.jwt_secret,
            jwt_access_ttl_minutes=settings.jwt_access_ttl_minutes,
            refresh_token_ttl_days=settings.refresh_token_ttl_days,
        ),
        get_refresh_token_store(),
    )


@lru_cache
def get_approval_notifier() -> ApprovalNotifier:
    settings = get_settings()
    if settings.approval_notifier == "log":
        return LoggingApprovalNotifier()
    return RQApprovalNotifier(
        redis_url=settings.redis_url,
        queue_name=settings.approval_queue_name,
        retry_max_attempts=settings.approval_retry_max_attempts,
    )


# R: Use case factories (new instance per call, shared collaborators)
def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(
        repository=get_user_repository(),
        verifier=get_credential_verifier(),
        notifier=get_approval_notifier(),
        min_password_length=get_settings().min_password_length,
    )


def get_authenticate_user_use_case() -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(
        repository=get_user_repository(),
        verifier=get_credential_verifier(),
        token_issuer=get_token_issuer(),
        require_customer_approval=get_settings().require_customer_approval,
    )


def get_approve_customer_use_case() -> ApproveCustomerUseCase:
    return ApproveCustomerUseCase(repository=get_user_repository())


def get_add_vendor_comment_use_case() -> AddVendorCommentUseCase:
    settings = get_settings()
    return AddVendorCommentUseCase(
        repository=get_user_repository(),
        min_rating=settings.min_rating,
        max_rating=settings.max_rating,
        max_attempts=settings.max_update_attempts,
    )


def get_update_vendor_comment_use_case() -> UpdateVendorCommentUseCase:
    return UpdateVendorCommentUseCase(
        repository=get_user_repository(),
        max_attempts=get_settings().max_update_attempts,
    )


def get_get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(repository=get_user_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(repository=get_user_repository())


def get_update_user_use_case() -> UpdateUserUseCase:
    return UpdateUserUseCase(
        repository=get_user_repository(),
        verifier=get_credential_verifier(),
    )


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(repository=get_user_repository())


def get_check_administrator_use_case() -> CheckAdministratorUseCase:
    return CheckAdministratorUseCase(repository=get_user_repository())


# R: Lifecycle hooks for the embedding application
def init_storage() -> None:
    """R: Open the Postgres pool when the Postgres directory is configured."""
    settings = get_settings()
    if settings.storage_backend == "postgres":
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )


def shutdown_storage() -> None:
    close_pool()
