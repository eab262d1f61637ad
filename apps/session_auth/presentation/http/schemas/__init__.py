"""HTTP Schemas."""

from apps.session_auth.presentation.http.schemas.auth import (
    LoginBody,
    LoginResponse,
    MessageResponse,
    RegisterBody,
    RegisterResponse,
    TokenPayloadResponse,
)
from apps.session_auth.presentation.http.schemas.sessions import (
    LogoutAllResponse,
    SessionListResponse,
    SessionResponse,
)

__all__ = [
    "LoginBody",
    "LoginResponse",
    "LogoutAllResponse",
    "MessageResponse",
    "RegisterBody",
    "RegisterResponse",
    "SessionListResponse",
    "SessionResponse",
    "TokenPayloadResponse",
]
