"""Domain entities for the read-only authenticated session."""

from dataclasses import dataclass
from enum import Enum


class SessionStatus(str, Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class UserRole(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    COMPANY_ADMIN = "COMPANY_ADMIN"
    INSTRUCTOR = "INSTRUCTOR"
    STUDENT = "STUDENT"
    USER = "USER"


@dataclass(frozen=True)
class SessionUser:
    id: str
    role: str
    name: str = ""
    email: str = ""
    company_id: str | None = None


@dataclass(frozen=True)
class AuthSession:
    """Snapshot of who is signed in, as reported by the session provider."""

    status: SessionStatus
    user: SessionUser | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.status == SessionStatus.AUTHENTICATED and self.user is not None

    @property
    def role(self) -> str | None:
        return self.user.role if self.user else None
