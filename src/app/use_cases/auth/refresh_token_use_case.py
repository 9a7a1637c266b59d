"""
Refresh Token Use Case

Exchanges a refresh token for a new access token.
"""

from uuid import UUID

from src.api.utils.jwt import issue_access_token, verify_refresh_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Token must be signed with the refresh secret and unexpired
    - The user must still exist and be active
    - Refresh tokens are stateless and are not rotated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[str]:
        claims = verify_refresh_token(refresh_token)
        if claims is None:
            return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

        try:
            user_id = UUID(claims["userId"])
        except ValueError:
            return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

        if user is None:
            return Return.err(Error("INVALID_TOKEN", "User not found"))
        if not user.is_active:
            return Return.err(Error("ACCOUNT_INACTIVE", "User account is inactive"))

        return Return.ok(issue_access_token(user))
