"""Domain Exceptions."""

from apps.session_auth.domain.exceptions.account import AccountAlreadyExistsError
from apps.session_auth.domain.exceptions.auth import (
    INVALID_SESSION_MESSAGE,
    AccountNotFoundError,
    InvalidSecretError,
    InvalidSessionError,
    InvalidTokenError,
)
from apps.session_auth.domain.exceptions.base import DomainError
from apps.session_auth.domain.exceptions.session import (
    SessionLimitExceededError,
    SessionNotFoundError,
    SessionStateError,
)
from apps.session_auth.domain.exceptions.validation import (
    InvalidEmailError,
    InvalidPasswordError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "INVALID_SESSION_MESSAGE",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InvalidSecretError",
    "InvalidSessionError",
    "InvalidTokenError",
    "SessionLimitExceededError",
    "SessionNotFoundError",
    "SessionStateError",
    "InvalidEmailError",
    "InvalidPasswordError",
    "ValidationError",
]
