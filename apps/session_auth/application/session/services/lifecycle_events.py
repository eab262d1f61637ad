"""Lifecycle Event Emitter.

로그인/로그아웃 생명주기 이벤트 메시지를 구성하고 발행합니다.
세션 저장소 커밋 이후에 호출되며, 발행 실패는 기록만 하고 전파하지 않습니다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any
from uuid import UUID

from apps.session_auth.application.session.exceptions import PublishError

if TYPE_CHECKING:
    from apps.session_auth.application.session.ports import EventPublisher
    from apps.session_auth.domain.entities.account import Account
    from apps.session_auth.domain.entities.session import Session

logger = logging.getLogger(__name__)

LOGIN_TOPIC = "login"
LOGOUT_TOPIC = "logout"

USER_LOGIN = "user_login"
USER_LOGOUT = "user_logout"
USER_LOGOUT_ALL = "user_logout_all"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class LifecycleEventEmitter:
    """생명주기 이벤트 발행기 (best-effort).

    Returns:
        각 메서드는 발행 성공 여부를 반환합니다.
    """

    def __init__(self, publisher: "EventPublisher") -> None:
        self._publisher = publisher

    async def user_login(
        self,
        *,
        account: "Account",
        session: "Session",
        active_session_count: int,
    ) -> bool:
        return await self._emit(
            LOGIN_TOPIC,
            {
                "event": USER_LOGIN,
                "account_id": str(account.id),
                "email": account.email,
                "session_id": str(session.id),
                "token": session.token,
                "active_session_count": active_session_count,
                "device_info": session.device_info,
                "ip_address": session.ip_address,
                "timestamp": _now(),
            },
        )

    async def user_logout(self, session: "Session") -> bool:
        return await self._emit(
            LOGOUT_TOPIC,
            {
                "event": USER_LOGOUT,
                "account_id": str(session.account_id),
                "session_id": str(session.id),
                "timestamp": _now(),
            },
        )

    async def user_logout_all(self, account_id: UUID, sessions_terminated: int) -> bool:
        return await self._emit(
            LOGOUT_TOPIC,
            {
                "event": USER_LOGOUT_ALL,
                "account_id": str(account_id),
                "sessions_terminated": sessions_terminated,
                "timestamp": _now(),
            },
        )

    async def _emit(self, topic: str, message: dict[str, Any]) -> bool:
        try:
            await self._publisher.publish(topic, message)
        except PublishError as e:
            logger.error(
                "Lifecycle event dropped",
                extra={
                    "topic": topic,
                    "event": message["event"],
                    "account_id": message["account_id"][:8],
                    "reason": e.reason,
                },
            )
            return False
        return True
