from uuid import uuid4

import pytest

from src.app.policy import POLICIES, Identity, check_access, roles_for
from src.domain.entities import UserRole


def identity(role: UserRole) -> Identity:
    return Identity(user_id=uuid4(), email=f"{role.value}@nuprc.gov.ng", role=role)


def test_anonymous_caller_is_unauthenticated():
    result = check_access(None, roles_for("news:create"))

    assert result.error.code == "UNAUTHENTICATED"


def test_role_outside_set_is_forbidden():
    result = check_access(identity(UserRole.editor), roles_for("news:delete"))

    assert result.error.code == "FORBIDDEN"


def test_allowed_role_passes_identity_through():
    caller = identity(UserRole.editor)

    result = check_access(caller, roles_for("news:publish"))

    assert result.value is caller


@pytest.mark.parametrize("operation", ["users:update", "users:delete"])
def test_super_admin_only_operations(operation):
    assert roles_for(operation) == frozenset({UserRole.super_admin})
    assert check_access(identity(UserRole.admin), roles_for(operation)).is_err()


def test_no_role_implies_another():
    # admin may manage ads, editors may not, even though editors write news
    assert check_access(identity(UserRole.editor), roles_for("ads:create")).is_err()
    assert check_access(identity(UserRole.content_manager), roles_for("news:create")).is_err()
    assert check_access(identity(UserRole.content_manager), roles_for("pages:create")).is_ok()


def test_every_operation_names_at_least_one_role():
    assert all(POLICIES.values())


def test_unknown_operation_raises():
    with pytest.raises(KeyError):
        roles_for("news:explode")
