"""Consumer Adapter.

MQ semantics를 담당하는 프로토콜 어댑터입니다.

ConsumerAdapter의 책임:
1. 메시지 decode (JSON)
2. routing key(topic)로 Handler 디스패칭
3. CommandResult 기반 ack/nack 결정

RabbitMQClient (Infra)
        │
        │ message stream (bytes)
        ▼
ConsumerAdapter (Presentation)
        │
        │ topic → Handler
        ▼
Handler (Presentation)
        │
        │ LifecycleEvent
        ▼
Command (Application)
        │
        │ CommandResult
        ▼
ConsumerAdapter
        │
        └── ack / nack / requeue
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from aio_pika.abc import AbstractIncomingMessage

    from apps.session_worker.presentation.handlers.lifecycle_handler import (
        LifecycleEventHandler,
    )

logger = logging.getLogger(__name__)


class ConsumerAdapter:
    """Consumer 어댑터.

    topic → Handler 매핑은 생성 시 한 번 구성되고 이후 변경되지 않습니다.
    """

    def __init__(self, handlers: Iterable["LifecycleEventHandler"]) -> None:
        """Initialize.

        Args:
            handlers: topic별 메시지 핸들러 (DI)

        Raises:
            ValueError: 같은 topic에 핸들러가 둘 이상인 경우
        """
        registry: dict[str, LifecycleEventHandler] = {}
        for handler in handlers:
            if handler.topic in registry:
                raise ValueError(f"Duplicate handler for topic: {handler.topic}")
            registry[handler.topic] = handler
        self._handlers = registry
        self._processed = 0
        self._retried = 0
        self._dropped = 0

    @property
    def topics(self) -> tuple[str, ...]:
        """바인딩할 topic 목록."""
        return tuple(self._handlers)

    async def on_message(self, message: "AbstractIncomingMessage") -> None:
        """메시지 처리 콜백.

        Args:
            message: RabbitMQ 메시지
        """
        topic = message.routing_key or ""
        handler = self._handlers.get(topic)
        if handler is None:
            await message.ack()
            self._dropped += 1
            logger.warning("No handler for topic", extra={"topic": topic})
            return

        try:
            # 1. Decode
            data = json.loads(message.body.decode())
            if not isinstance(data, dict):
                raise ValueError("message body must be a JSON object")

            # 2. Dispatch to Handler
            result = await handler.handle(data)

            # 3. ack/nack 결정
            log_ctx = {"topic": topic, "event": data.get("event")}
            if result.is_success:
                await message.ack()
                self._processed += 1
                logger.debug("Message processed", extra=log_ctx)

            elif result.is_retryable:
                # nack + requeue
                await message.nack(requeue=True)
                self._retried += 1
                logger.warning(
                    "Message requeued for retry",
                    extra={**log_ctx, "reason": result.reason},
                )

            elif result.should_drop:
                # ack (메시지 버림)
                await message.ack()
                self._dropped += 1
                logger.warning(
                    "Message dropped",
                    extra={**log_ctx, "reason": result.reason},
                )

        except (UnicodeDecodeError, ValueError) as e:
            # JSON 파싱 실패 → 버림 (JSONDecodeError는 ValueError 하위 클래스)
            await message.ack()
            self._dropped += 1
            logger.error("Invalid JSON message", extra={"topic": topic, "error": str(e)})

        except Exception:
            # 예상치 못한 오류 → requeue
            await message.nack(requeue=True)
            self._retried += 1
            logger.exception("Unexpected error in consumer adapter", extra={"topic": topic})

    @property
    def stats(self) -> dict[str, int]:
        """통계 반환."""
        return {
            "processed": self._processed,
            "retried": self._retried,
            "dropped": self._dropped,
        }
