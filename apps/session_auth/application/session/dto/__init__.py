"""Session DTOs."""

from apps.session_auth.application.session.dto.session import (
    LoginRequest,
    LoginResult,
    SessionSummary,
)

__all__ = ["LoginRequest", "LoginResult", "SessionSummary"]
