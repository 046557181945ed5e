"""Abstract session provider interface — read-only view of authentication state."""

from abc import ABC, abstractmethod

from admin_console.domain.entities import AuthSession


class SessionProvider(ABC):
    """Port — supplies the current session; consumers never mutate it."""

    @abstractmethod
    def current(self) -> AuthSession:
        ...
