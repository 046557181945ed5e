"""Unit tests for the admin session gate."""

import pytest

from admin_console.application.services import check_access
from admin_console.domain.entities import AuthSession, SessionStatus, UserRole
from admin_console.infrastructure.session import StaticSessionProvider


def _session(role: UserRole) -> AuthSession:
    return StaticSessionProvider.for_role(role.value).current()


def test_loading_session_is_pending():
    decision = check_access(AuthSession(status=SessionStatus.LOADING), "/admin/training/courses")

    assert decision.pending
    assert not decision.allowed
    assert decision.redirect_to is None


def test_anonymous_user_goes_to_admin_login_with_callback():
    decision = check_access(StaticSessionProvider().current(), "/admin/training/courses")

    assert not decision.allowed
    assert decision.redirect_to == "/admin/login?callbackUrl=%2Fadmin%2Ftraining%2Fcourses"


def test_anonymous_user_goes_to_superadmin_login():
    decision = check_access(StaticSessionProvider().current(), "/superadmin/companies")

    assert decision.redirect_to.startswith("/superadmin/login?callbackUrl=")


@pytest.mark.parametrize(
    "role, pathname",
    [
        (UserRole.SUPER_ADMIN, "/superadmin/companies"),
        (UserRole.SUPER_ADMIN, "/admin/training/courses"),
        (UserRole.COMPANY_ADMIN, "/admin/training/courses"),
    ],
)
def test_admin_roles_are_allowed(role, pathname):
    assert check_access(_session(role), pathname).allowed


def test_company_admin_is_sent_to_own_dashboard():
    decision = check_access(_session(UserRole.COMPANY_ADMIN), "/superadmin/companies")

    assert not decision.allowed
    assert decision.redirect_to == "/admin/dashboard"


@pytest.mark.parametrize("role", [UserRole.STUDENT, UserRole.INSTRUCTOR, UserRole.USER])
def test_non_admin_roles_go_to_login(role):
    decision = check_access(_session(role), "/admin/training/courses")

    assert not decision.allowed
    assert decision.redirect_to == "/admin/login"
