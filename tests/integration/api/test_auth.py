import pytest
from httpx import AsyncClient

from src.api.utils.jwt import issue_access_token, issue_refresh_token
from src.domain.entities import AuditAction, AuditLog, User, UserRole


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient, create_user, fetch_all):
    """
    Given an active user
    When they log in with the right password
    Then they get a token pair and their summary without the password hash
    And last_login is set and a login audit entry is recorded
    """
    user = await create_user(email="editor@nuprc.gov.ng", role=UserRole.editor)

    response = await client.post(
        "/api/auth/login", json={"email": "Editor@nuprc.gov.ng", "password": "Password123"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Login successful"
    assert data["user"]["email"] == "editor@nuprc.gov.ng"
    assert data["user"]["role"] == "editor"
    assert data["user"]["firstName"] == "Test"
    assert "passwordHash" not in data["user"]
    assert data["tokens"]["accessToken"]
    assert data["tokens"]["refreshToken"]

    [stored] = await fetch_all(User, User.id == user.id)
    assert stored.last_login is not None

    entries = await fetch_all(AuditLog, AuditLog.user_id == user.id)
    assert [entry.action for entry in entries] == [AuditAction.login]
    assert entries[0].resource == "User"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, create_user):
    await create_user(email="admin@nuprc.gov.ng")

    response = await client.post(
        "/api/auth/login", json={"email": "admin@nuprc.gov.ng", "password": "WrongPass1"}
    )

    assert response.status_code == 401
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "INVALID_CREDENTIALS"
    assert data["message"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_unknown_email_looks_like_wrong_password(client: AsyncClient):
    response = await client.post(
        "/api/auth/login", json={"email": "nobody@nuprc.gov.ng", "password": "Password123"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_inactive_account(client: AsyncClient, create_user):
    await create_user(email="gone@nuprc.gov.ng", is_active=False)

    response = await client.post(
        "/api/auth/login", json={"email": "gone@nuprc.gov.ng", "password": "Password123"}
    )

    assert response.status_code == 401
    assert response.json()["code"] == "ACCOUNT_INACTIVE"


@pytest.mark.asyncio
async def test_login_requires_email_and_password(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"email": "not-an-email"})

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    fields = {error["field"] for error in data["errors"]}
    assert fields == {"email", "password"}


@pytest.mark.asyncio
async def test_refresh_returns_new_access_token(client: AsyncClient, create_user):
    user = await create_user()

    response = await client.post(
        "/api/auth/refresh", json={"refreshToken": issue_refresh_token(user)}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Token refreshed successfully"

    me = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {data['accessToken']}"}
    )
    assert me.status_code == 200


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(client: AsyncClient, create_user):
    """Access tokens are signed with a different secret than refresh tokens"""
    user = await create_user()

    response = await client.post(
        "/api/auth/refresh", json={"refreshToken": issue_access_token(user)}
    )

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_refresh_for_deactivated_user(client: AsyncClient, create_user):
    user = await create_user(is_active=False)

    response = await client.post(
        "/api/auth/refresh", json={"refreshToken": issue_refresh_token(user)}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "User account is inactive"


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient, create_user):
    user = await create_user(email="cm@nuprc.gov.ng", role=UserRole.content_manager)

    response = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {issue_access_token(user)}"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["user"]["id"] == str(user.id)
    assert data["user"]["role"] == "content-manager"
    assert data["user"]["isActive"] is True
    assert "passwordHash" not in data["user"]


@pytest.mark.asyncio
async def test_me_without_token(client: AsyncClient):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["message"] == "No authentication token provided"


@pytest.mark.asyncio
@pytest.mark.parametrize("header", ["Token abc", "Bearer", "bearer abc", "Bearer a b"])
async def test_me_with_malformed_header(client: AsyncClient, header: str):
    response = await client.get("/api/auth/me", headers={"Authorization": header})

    assert response.status_code == 401
    assert response.json()["message"] == "No authentication token provided"


@pytest.mark.asyncio
async def test_me_with_garbage_token(client: AsyncClient):
    response = await client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.jwt"})

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_token_of_deactivated_user_is_rejected(client: AsyncClient, create_user):
    user = await create_user(is_active=False)

    response = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {issue_access_token(user)}"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "User account is inactive"


@pytest.mark.asyncio
async def test_change_password(client: AsyncClient, create_user, fetch_all):
    user = await create_user()
    headers = {"Authorization": f"Bearer {issue_access_token(user)}"}

    response = await client.post(
        "/api/auth/change-password",
        json={"currentPassword": "Password123", "newPassword": "NewSecret9"},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Password changed successfully"

    login = await client.post(
        "/api/auth/login", json={"email": user.email, "password": "NewSecret9"}
    )
    assert login.status_code == 200

    entries = await fetch_all(
        AuditLog, AuditLog.user_id == user.id, AuditLog.action == AuditAction.update
    )
    assert len(entries) == 1
    assert entries[0].changes == {"field": "password", "action": "changed"}


@pytest.mark.asyncio
async def test_change_password_wrong_current(client: AsyncClient, create_user):
    user = await create_user()

    response = await client.post(
        "/api/auth/change-password",
        json={"currentPassword": "Nope12345", "newPassword": "NewSecret9"},
        headers={"Authorization": f"Bearer {issue_access_token(user)}"},
    )

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_PASSWORD"


@pytest.mark.asyncio
async def test_change_password_too_weak(client: AsyncClient, create_user):
    user = await create_user()

    response = await client.post(
        "/api/auth/change-password",
        json={"currentPassword": "Password123", "newPassword": "alllowercase1"},
        headers={"Authorization": f"Bearer {issue_access_token(user)}"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "newPassword"


@pytest.mark.asyncio
async def test_logout_records_audit_entry(client: AsyncClient, create_user, fetch_all):
    user = await create_user()

    response = await client.post(
        "/api/auth/logout", headers={"Authorization": f"Bearer {issue_access_token(user)}"}
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Logout successful"
    entries = await fetch_all(AuditLog, AuditLog.user_id == user.id)
    assert [entry.action for entry in entries] == [AuditAction.logout]
