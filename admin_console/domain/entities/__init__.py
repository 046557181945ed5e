from .entity import Entity
from .filter_state import FilterState, NumericRange
from .confirmation import (
    ConfirmationCopy,
    ConfirmationFlow,
    ConfirmationState,
    StepCopy,
)
from .session import AuthSession, SessionStatus, SessionUser, UserRole
from .uploaded_file import UploadedFile

__all__ = [
    "Entity",
    "FilterState",
    "NumericRange",
    "ConfirmationCopy",
    "ConfirmationFlow",
    "ConfirmationState",
    "StepCopy",
    "AuthSession",
    "SessionStatus",
    "SessionUser",
    "UserRole",
    "UploadedFile",
]
