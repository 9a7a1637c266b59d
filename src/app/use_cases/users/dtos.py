"""
User Management DTOs
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import EmailStr, Field, field_validator

from src.app.use_cases.schema import CamelModel
from src.domain.entities import User, UserRole


def normalize_role(value: Any) -> Any:
    """Accept "Super_Admin", "super_admin" and "super-admin" alike."""
    if isinstance(value, str):
        return value.strip().lower().replace("_", "-")
    return value


class CreateUserCommand(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: UserRole = UserRole.content_manager

    @field_validator("role", mode="before")
    @classmethod
    def check_role(cls, value: Any) -> Any:
        return normalize_role(value)


class UpdateUserCommand(CamelModel):
    """Every field optional; only those sent are applied"""

    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    password: Optional[str] = Field(default=None, min_length=8)

    @field_validator("role", mode="before")
    @classmethod
    def check_role(cls, value: Any) -> Any:
        return normalize_role(value)


class UserSummary(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    role: str
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=UserRole(user.role).value,
            is_active=user.is_active,
            last_login=user.last_login,
            created_at=user.created_at,
        )
