"""Record Lifecycle Command.

로그인/로그아웃 이벤트를 계정별 감사 기록에 저장하는 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.session_worker.application.common.result import CommandResult

if TYPE_CHECKING:
    from apps.session_worker.application.common.dto.lifecycle_event import LifecycleEvent
    from apps.session_worker.application.common.ports.audit_store import AuditStore

logger = logging.getLogger(__name__)


class RecordLifecycleCommand:
    """생명주기 기록 Command.

    at-least-once 전달이므로 같은 이벤트가 중복 기록될 수 있습니다.
    """

    def __init__(self, audit_store: "AuditStore") -> None:
        self._store = audit_store

    async def execute(self, event: "LifecycleEvent") -> CommandResult:
        """이벤트 기록.

        Raises:
            저장소 오류는 그대로 전파됩니다 (Handler에서 retryable 처리).
        """
        await self._store.append(event.account_id, event.to_dict())
        logger.info(
            "Lifecycle event recorded",
            extra={
                "event": event.event,
                "account_id": str(event.account_id)[:8],
                "session_id": str(event.session_id)[:8] if event.session_id else None,
            },
        )
        return CommandResult.success()
