"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .get_profile_use_case import GetProfileUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import (
    AuthUser,
    ChangePasswordCommand,
    LoginResponse,
    ProfileResponse,
    TokenPair,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "GetProfileUseCase",
    "ChangePasswordUseCase",
    # DTOs - Commands
    "ChangePasswordCommand",
    # DTOs - Responses
    "LoginResponse",
    "ProfileResponse",
    # DTOs - Nested Models
    "AuthUser",
    "TokenPair",
]
