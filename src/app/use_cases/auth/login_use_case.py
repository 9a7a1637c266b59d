"""
Login Use Case

Handles credential checks and returns an access/refresh token pair.
"""

import bcrypt
from typing import Optional

from src.api.utils.jwt import issue_token_pair
from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.passwords import verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditAction, UserRole
from src.domain.result import Error, Result, Return
from .dtos import AuthUser, LoginResponse, TokenPair


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Emails are matched lowercased
    - Unknown email and wrong password fail the same way
    - Deactivated accounts cannot log in
    - Updates user.last_login and records a login audit entry
    """

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing user summary and tokens, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email.strip().lower())

            if user is None:
                # Hash dummy password to keep timing close to the real check
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            # Password first: an inactive account is only revealed to its owner
            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.is_active:
                return Return.err(
                    Error("ACCOUNT_INACTIVE", "Your account has been deactivated")
                )

            user.last_login = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                user.id, AuditAction.login, "User", user.id
            )

            tokens = issue_token_pair(user)
            return Return.ok(
                LoginResponse(
                    user=AuthUser(
                        id=str(user.id),
                        email=user.email,
                        first_name=user.first_name,
                        last_name=user.last_name,
                        role=UserRole(user.role).value,
                        last_login=user.last_login,
                    ),
                    tokens=TokenPair(
                        access_token=tokens["accessToken"],
                        refresh_token=tokens["refreshToken"],
                    ),
                )
            )
