from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field

from src.api.error import unwrap
from src.api.responses import envelope
from src.api.utils.access import authenticate
from src.app.policy import Identity
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ChangePasswordCommand,
    ChangePasswordUseCase,
    GetProfileUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
)
from src.app.use_cases.schema import CamelModel
from src.depends import get_request_meta, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(CamelModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class RefreshRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1)


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    """
    Authenticate with email and password.

    Returns the user summary and an access/refresh token pair.

    Raises:
        - 401 Unauthorized: Unknown email, wrong password or inactive account
    """
    result = await LoginUseCase(uow, meta).execute(request.email, request.password)
    response = unwrap(result)
    return envelope(message="Login successful", user=response.user, tokens=response.tokens)


@router.post("/refresh", status_code=status.HTTP_200_OK)
async def refresh(request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Exchange a refresh token for a new access token.

    Raises:
        - 401 Unauthorized: Token invalid or expired, user gone or inactive
    """
    result = await RefreshTokenUseCase(uow).execute(request.refresh_token)
    return envelope(message="Token refreshed successfully", accessToken=unwrap(result))


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(
    identity: Identity = Depends(authenticate),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    """Tokens are stateless; logout only leaves an audit entry."""
    unwrap(await LogoutUseCase(uow, meta).execute(identity.user_id))
    return envelope(message="Logout successful")


@router.get("/me", status_code=status.HTTP_200_OK)
async def me(
    identity: Identity = Depends(authenticate),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProfileUseCase(uow).execute(identity.user_id)
    return envelope(user=unwrap(result))


@router.post("/change-password", status_code=status.HTTP_200_OK)
async def change_password(
    command: ChangePasswordCommand,
    identity: Identity = Depends(authenticate),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    """
    Change the caller's own password.

    Raises:
        - 400 Bad Request: New password too weak
        - 401 Unauthorized: Current password is wrong
    """
    unwrap(await ChangePasswordUseCase(uow, meta).execute(identity.user_id, command))
    return envelope(message="Password changed successfully")
