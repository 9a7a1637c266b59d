"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from src.app.use_cases.schema import CamelModel

_STRONG_PASSWORD = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


# ============================================================================
# Command DTOs
# ============================================================================


class ChangePasswordCommand(CamelModel):
    """Current password plus a new one meeting the strength rules"""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)

    @field_validator("new_password")
    @classmethod
    def check_strength(cls, value: str) -> str:
        if not _STRONG_PASSWORD.match(value):
            raise ValueError(
                "New password must contain at least one uppercase letter, "
                "one lowercase letter, and one number"
            )
        return value


# ============================================================================
# Response DTOs
# ============================================================================


class AuthUser(CamelModel):
    """User summary returned on login"""

    id: str
    email: str
    first_name: str
    last_name: str
    role: str
    last_login: Optional[datetime] = None


class TokenPair(CamelModel):
    access_token: str
    refresh_token: str


class LoginResponse(CamelModel):
    """Response for user login use case"""

    user: AuthUser
    tokens: TokenPair


class ProfileResponse(CamelModel):
    """The caller's own profile, never including the password hash"""

    id: str
    email: str
    first_name: str
    last_name: str
    role: str
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime
