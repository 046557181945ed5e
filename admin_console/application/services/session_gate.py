"""Decides whether a session may open an admin area.

The gate only reads the session. Redirecting is left to whoever renders
the layout; this module just says where to.
"""

import logging
from dataclasses import dataclass
from urllib.parse import quote

from admin_console.domain.entities import AuthSession, SessionStatus, UserRole

logger = logging.getLogger(__name__)

SUPERADMIN_LOGIN = "/superadmin/login"
ADMIN_LOGIN = "/admin/login"
SUPERADMIN_DASHBOARD = "/superadmin/dashboard"
ADMIN_DASHBOARD = "/admin/dashboard"

_ADMIN_ROLES = frozenset({UserRole.SUPER_ADMIN.value, UserRole.COMPANY_ADMIN.value})


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    redirect_to: str | None = None
    # True while the session provider has not answered yet
    pending: bool = False


def _login_path(pathname: str) -> str:
    return SUPERADMIN_LOGIN if pathname.startswith("/superadmin") else ADMIN_LOGIN


def _dashboard_for(role: str | None) -> str:
    if role == UserRole.SUPER_ADMIN.value:
        return SUPERADMIN_DASHBOARD
    return ADMIN_DASHBOARD


def check_access(session: AuthSession, pathname: str) -> GateDecision:
    """Check ``session`` against the area ``pathname`` belongs to.

    Unauthenticated sessions go to the matching login page with a
    ``callbackUrl``. Super-admin pages need SUPER_ADMIN; admin pages need
    SUPER_ADMIN or COMPANY_ADMIN. Authenticated users without the role are
    sent to their own dashboard, or to login if that is where they already are.
    """
    if session.status == SessionStatus.LOADING:
        return GateDecision(allowed=False, pending=True)

    if not session.is_authenticated:
        login = _login_path(pathname)
        return GateDecision(
            allowed=False,
            redirect_to=f"{login}?callbackUrl={quote(pathname, safe='')}",
        )

    role = session.role
    if pathname.startswith("/superadmin"):
        allowed = role == UserRole.SUPER_ADMIN.value
    elif pathname.startswith("/admin"):
        allowed = role in _ADMIN_ROLES
    else:
        allowed = True

    if allowed:
        return GateDecision(allowed=True)

    logger.info("Access to %s denied for role %s", pathname, role)
    target = _dashboard_for(role)
    if role not in _ADMIN_ROLES or pathname.startswith(target):
        target = _login_path(pathname)
    return GateDecision(allowed=False, redirect_to=target)
