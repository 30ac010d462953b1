"""
Name: User Use Cases (package exports)

Responsibilities:
  - Single import point for identity and reputation use cases, their
    DTOs and result models
"""

from .add_vendor_comment import AddCommentInput, AddVendorCommentUseCase
from .approve_customer import ApproveCustomerUseCase
from .authenticate_user import AuthenticateUserInput, AuthenticateUserUseCase
from .check_administrator import CheckAdministratorUseCase
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .register_user import RegisterUserInput, RegisterUserUseCase
from .update_user import UpdateUserInput, UpdateUserUseCase
from .update_vendor_comment import UpdateVendorCommentUseCase
from .user_results import (
    ApprovalResult,
    AuthResult,
    DeleteUserResult,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
)

__all__ = [
    # Use Cases
    "AddVendorCommentUseCase",
    "ApproveCustomerUseCase",
    "AuthenticateUserUseCase",
    "CheckAdministratorUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "RegisterUserUseCase",
    "UpdateUserUseCase",
    "UpdateVendorCommentUseCase",
    # DTOs
    "AddCommentInput",
    "AuthenticateUserInput",
    "RegisterUserInput",
    "UpdateUserInput",
    # Results
    "ApprovalResult",
    "AuthResult",
    "DeleteUserResult",
    "UserError",
    "UserErrorCode",
    "UserListResult",
    "UserResult",
]
