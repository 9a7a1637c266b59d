from unittest.mock import AsyncMock
from uuid import uuid4

import bcrypt
import pytest

from src.api.utils.jwt import (
    issue_access_token,
    issue_refresh_token,
    verify_access_token,
)
from src.app.services.audit_trail import RequestMeta
from src.app.use_cases.auth import (
    ChangePasswordCommand,
    ChangePasswordUseCase,
    GetProfileUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
)
from src.domain.entities import AuditAction, User, UserRole

PASSWORD = "Password123"


def make_user(**overrides) -> User:
    fields = dict(
        id=uuid4(),
        email="editor@nuprc.gov.ng",
        password_hash=bcrypt.hashpw(PASSWORD.encode(), bcrypt.gensalt(4)).decode(),
        first_name="Ada",
        last_name="Obi",
        role=UserRole.editor,
    )
    fields.update(overrides)
    return User(**fields)


@pytest.fixture
def users(mock_uow):
    mock_uow.users.get_by_email = AsyncMock(return_value=None)
    mock_uow.users.get_by_id = AsyncMock(return_value=None)
    mock_uow.users.update = AsyncMock(side_effect=lambda user: user)
    return mock_uow.users


@pytest.mark.asyncio
async def test_successful_login(mock_uow, users):
    user = make_user()
    users.get_by_email.return_value = user
    meta = RequestMeta(ip_address="10.0.0.1", user_agent="pytest")

    result = await LoginUseCase(mock_uow, meta).execute("  Editor@NUPRC.gov.ng ", PASSWORD)

    assert result.is_ok()
    users.get_by_email.assert_awaited_once_with("editor@nuprc.gov.ng")
    response = result.value
    assert response.user.id == str(user.id)
    assert response.user.role == "editor"
    assert response.user.last_login is not None
    claims = verify_access_token(response.tokens.access_token)
    assert claims["userId"] == str(user.id)
    assert claims["role"] == "editor"

    entry = mock_uow.audit_logs.create.call_args.args[0]
    assert entry.action == AuditAction.login
    assert entry.resource == "User"
    assert entry.ip_address == "10.0.0.1"
    assert entry.user_agent == "pytest"


@pytest.mark.asyncio
async def test_login_unknown_email(mock_uow, users):
    result = await LoginUseCase(mock_uow).execute("nobody@nuprc.gov.ng", PASSWORD)

    assert result.error.code == "INVALID_CREDENTIALS"
    mock_uow.audit_logs.create.assert_not_called()


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, users):
    users.get_by_email.return_value = make_user()

    result = await LoginUseCase(mock_uow).execute("editor@nuprc.gov.ng", "WrongPass1")

    assert result.error.code == "INVALID_CREDENTIALS"
    users.update.assert_not_called()


@pytest.mark.asyncio
async def test_inactive_account_checked_after_password(mock_uow, users):
    users.get_by_email.return_value = make_user(is_active=False)

    wrong = await LoginUseCase(mock_uow).execute("editor@nuprc.gov.ng", "WrongPass1")
    right = await LoginUseCase(mock_uow).execute("editor@nuprc.gov.ng", PASSWORD)

    assert wrong.error.code == "INVALID_CREDENTIALS"
    assert right.error.code == "ACCOUNT_INACTIVE"
    assert right.error.message == "Your account has been deactivated"


@pytest.mark.asyncio
async def test_refresh_issues_access_token(mock_uow, users):
    user = make_user()
    users.get_by_id.return_value = user

    result = await RefreshTokenUseCase(mock_uow).execute(issue_refresh_token(user))

    assert verify_access_token(result.value)["email"] == user.email


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(mock_uow, users):
    result = await RefreshTokenUseCase(mock_uow).execute(issue_access_token(make_user()))

    assert result.error.code == "INVALID_TOKEN"
    users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_refresh_for_deleted_user(mock_uow, users):
    result = await RefreshTokenUseCase(mock_uow).execute(issue_refresh_token(make_user()))

    assert result.error.code == "INVALID_TOKEN"
    assert result.error.message == "User not found"


@pytest.mark.asyncio
async def test_profile(mock_uow, users):
    user = make_user(role=UserRole.super_admin)
    users.get_by_id.return_value = user

    result = await GetProfileUseCase(mock_uow).execute(user.id)

    assert result.value.role == "super-admin"
    assert "password_hash" not in result.value.model_dump()


@pytest.mark.asyncio
async def test_logout_is_audited(mock_uow):
    user_id = uuid4()

    result = await LogoutUseCase(mock_uow).execute(user_id)

    assert result.is_ok()
    entry = mock_uow.audit_logs.create.call_args.args[0]
    assert entry.action == AuditAction.logout
    assert entry.user_id == user_id


@pytest.mark.asyncio
async def test_change_password(mock_uow, users):
    user = make_user()
    old_hash = user.password_hash
    users.get_by_id.return_value = user
    command = ChangePasswordCommand(current_password=PASSWORD, new_password="Another1Pass")

    result = await ChangePasswordUseCase(mock_uow).execute(user.id, command)

    assert result.is_ok()
    assert user.password_hash != old_hash
    assert bcrypt.checkpw(b"Another1Pass", user.password_hash.encode())
    entry = mock_uow.audit_logs.create.call_args.args[0]
    assert entry.changes == {"field": "password", "action": "changed"}


@pytest.mark.asyncio
async def test_change_password_wrong_current(mock_uow, users):
    user = make_user()
    users.get_by_id.return_value = user
    command = ChangePasswordCommand(current_password="Nope12345", new_password="Another1Pass")

    result = await ChangePasswordUseCase(mock_uow).execute(user.id, command)

    assert result.error.code == "INVALID_PASSWORD"
    users.update.assert_not_called()


@pytest.mark.parametrize("weak", ["short1A", "nouppercase1", "NOLOWERCASE1", "NoDigitsHere"])
def test_weak_new_password_is_rejected(weak):
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        ChangePasswordCommand(current_password=PASSWORD, new_password=weak)
