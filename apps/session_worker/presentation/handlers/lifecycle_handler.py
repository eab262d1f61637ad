"""Lifecycle Handler.

메시지를 검증하고 Command를 호출하는 Presentation Layer 컴포넌트입니다.

Handler의 책임:
1. 메시지 검증 (LifecycleEvent.from_dict)
2. topic과 이벤트 이름 일치 확인
3. Command 호출 및 CommandResult 전달

ack/nack 결정은 ConsumerAdapter에서 합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from apps.session_worker.application.common.dto.lifecycle_event import LifecycleEvent
from apps.session_worker.application.common.result import CommandResult

if TYPE_CHECKING:
    from apps.session_worker.application.commands.record_lifecycle import (
        RecordLifecycleCommand,
    )

logger = logging.getLogger(__name__)


class LifecycleEventHandler:
    """topic 하나에 대한 생명주기 메시지 핸들러."""

    topic: ClassVar[str]
    accepted_events: ClassVar[frozenset[str]]

    def __init__(self, command: "RecordLifecycleCommand") -> None:
        self._command = command

    async def handle(self, data: dict[str, Any]) -> CommandResult:
        """메시지 처리.

        Returns:
            CommandResult: 형식 오류는 drop, 저장소 오류는 retryable
        """
        try:
            event = LifecycleEvent.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            # 메시지 형식 오류 → 재시도 무의미
            logger.error(
                "Invalid message format",
                extra={"topic": self.topic, "error": str(e)},
            )
            return CommandResult.drop(f"Invalid message format: {e}")

        if event.event not in self.accepted_events:
            logger.warning(
                "Event published on unexpected topic",
                extra={"topic": self.topic, "event": event.event},
            )
            return CommandResult.drop(f"{event.event} is not a {self.topic} event")

        try:
            return await self._command.execute(event)
        except Exception as e:
            # Redis 장애 등 → 재시도 가능
            logger.exception(
                "Failed to record lifecycle event",
                extra={"topic": self.topic, "event": event.event},
            )
            return CommandResult.retryable(str(e))
