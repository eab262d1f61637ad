"""Session DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from apps.session_auth.domain.entities.session import Session


@dataclass(frozen=True)
class LoginRequest:
    """로그인 요청."""

    email: str
    password: str = field(repr=False)
    device_info: str | None = None
    ip_address: str | None = None


@dataclass(frozen=True)
class LoginResult:
    """로그인 결과."""

    token: str = field(repr=False)
    active_session_count: int
    session_id: UUID


@dataclass(frozen=True)
class SessionSummary:
    """세션 요약 (토큰 제외)."""

    id: UUID
    device_info: str
    ip_address: str
    created_at: datetime
    last_activity: datetime | None

    @classmethod
    def from_session(cls, session: Session) -> SessionSummary:
        return cls(
            id=session.id,
            device_info=session.device_info,
            ip_address=session.ip_address,
            created_at=session.created_at,
            last_activity=session.last_activity,
        )
