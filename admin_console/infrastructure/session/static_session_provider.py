"""Session provider backed by a fixed snapshot (CLI tools, scripts, tests)."""

from admin_console.application.interfaces import SessionProvider
from admin_console.domain.entities import AuthSession, SessionStatus, SessionUser


class StaticSessionProvider(SessionProvider):
    def __init__(self, session: AuthSession | None = None):
        self._session = session or AuthSession(status=SessionStatus.UNAUTHENTICATED)

    @classmethod
    def for_role(cls, role: str, user_id: str = "local", **user_fields: str) -> "StaticSessionProvider":
        user = SessionUser(id=user_id, role=role, **user_fields)
        return cls(AuthSession(status=SessionStatus.AUTHENTICATED, user=user))

    def current(self) -> AuthSession:
        return self._session
