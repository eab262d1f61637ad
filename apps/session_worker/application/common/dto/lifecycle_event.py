"""Lifecycle Event DTO.

RabbitMQ에서 수신하는 로그인/로그아웃 이벤트 데이터 구조입니다.
토큰 원문은 수신하더라도 DTO에 보관하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

USER_LOGIN = "user_login"
USER_LOGOUT = "user_logout"
USER_LOGOUT_ALL = "user_logout_all"

EVENT_TOPICS = {
    USER_LOGIN: "login",
    USER_LOGOUT: "logout",
    USER_LOGOUT_ALL: "logout",
}


@dataclass(frozen=True)
class LifecycleEvent:
    """생명주기 이벤트 DTO.

    Attributes:
        event: 이벤트 이름 (user_login, user_logout, user_logout_all)
        account_id: 계정 ID
        timestamp: 이벤트 발생 시간
        session_id: 세션 ID (user_logout_all 제외)
        email: 로그인 이메일 (user_login)
        active_session_count: 로그인 후 활성 세션 수 (user_login)
        sessions_terminated: 종료된 세션 수 (user_logout_all)
        device_info: 기기 정보 (user_login)
        ip_address: IP 주소 (user_login)
    """

    event: str
    account_id: UUID
    timestamp: datetime
    session_id: UUID | None = None
    email: str | None = None
    active_session_count: int | None = None
    sessions_terminated: int | None = None
    device_info: str | None = None
    ip_address: str | None = None

    @property
    def topic(self) -> str:
        return EVENT_TOPICS[self.event]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LifecycleEvent:
        """딕셔너리에서 LifecycleEvent 생성.

        Raises:
            KeyError: 필수 필드 누락
            ValueError: 알 수 없는 이벤트 또는 잘못된 값
        """
        event = data["event"]
        if event not in EVENT_TOPICS:
            raise ValueError(f"Unknown lifecycle event: {event}")

        session_id = data.get("session_id")
        if event != USER_LOGOUT_ALL and not session_id:
            raise ValueError(f"{event} requires session_id")

        count = data.get("active_session_count")
        terminated = data.get("sessions_terminated")
        if event == USER_LOGOUT_ALL and terminated is None:
            raise ValueError("user_logout_all requires sessions_terminated")

        return cls(
            event=event,
            account_id=UUID(data["account_id"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            session_id=UUID(session_id) if session_id else None,
            email=data.get("email"),
            active_session_count=int(count) if count is not None else None,
            sessions_terminated=int(terminated) if terminated is not None else None,
            device_info=data.get("device_info"),
            ip_address=data.get("ip_address"),
        )

    def to_dict(self) -> dict[str, Any]:
        """감사 기록용 딕셔너리 (None 필드 제외)."""
        data: dict[str, Any] = {
            "event": self.event,
            "account_id": str(self.account_id),
            "timestamp": self.timestamp.isoformat(),
            "session_id": str(self.session_id) if self.session_id else None,
            "email": self.email,
            "active_session_count": self.active_session_count,
            "sessions_terminated": self.sessions_terminated,
            "device_info": self.device_info,
            "ip_address": self.ip_address,
        }
        return {key: value for key, value in data.items() if value is not None}
