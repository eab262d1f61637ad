"""RabbitMQ Lifecycle Event Publisher.

EventPublisher 포트의 RabbitMQ 구현체입니다.
Topic Exchange에 routing key = topic(login | logout)으로 발행하면
session_worker가 소비합니다.
"""

from __future__ import annotations

import asyncio
import json
import logging
import random
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import aio_pika
from aio_pika import DeliveryMode, ExchangeType, Message
from aio_pika.exceptions import AMQPError

from apps.session_auth.application.session.exceptions import PublishError

if TYPE_CHECKING:
    from aio_pika.abc import AbstractChannel, AbstractConnection, AbstractExchange

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (AMQPError, ConnectionError, OSError, asyncio.TimeoutError)


class RabbitMQLifecycleEventPublisher:
    """RabbitMQ 기반 생명주기 이벤트 발행자.

    EventPublisher 인터페이스 구현체입니다.
    일시적 오류는 지수 백오프로 제한된 횟수만 재시도한 뒤 PublishError를 발생시킵니다.
    """

    DEFAULT_EXCHANGE_NAME = "auth.lifecycle"

    def __init__(
        self,
        amqp_url: str,
        *,
        exchange_name: str = DEFAULT_EXCHANGE_NAME,
        max_retries: int = 3,
        retry_base_delay: float = 0.1,
        retry_max_delay: float = 2.0,
        publish_timeout: float = 5.0,
    ) -> None:
        """Initialize.

        Args:
            amqp_url: RabbitMQ 연결 URL
            exchange_name: Topic Exchange 이름
            max_retries: 최초 시도 이후 재시도 횟수
            retry_base_delay: 재시도 기본 지연 (초)
            retry_max_delay: 재시도 최대 지연 (초)
            publish_timeout: 발행 타임아웃 (초)
        """
        self._amqp_url = amqp_url
        self._exchange_name = exchange_name
        self._max_retries = max_retries
        self._retry_base_delay = retry_base_delay
        self._retry_max_delay = retry_max_delay
        self._publish_timeout = publish_timeout
        self._connection: AbstractConnection | None = None
        self._channel: AbstractChannel | None = None
        self._exchange: AbstractExchange | None = None

    async def connect(self) -> None:
        """RabbitMQ 연결."""
        if self._connection and not self._connection.is_closed:
            return

        self._connection = await aio_pika.connect_robust(self._amqp_url)
        self._channel = await self._connection.channel(publisher_confirms=True)

        # Topic Exchange 선언 (durable)
        self._exchange = await self._channel.declare_exchange(
            self._exchange_name,
            ExchangeType.TOPIC,
            durable=True,
        )
        logger.info(
            "RabbitMQ connected for lifecycle events",
            extra={"exchange": self._exchange_name},
        )

    async def close(self) -> None:
        """연결 종료."""
        if self._connection and not self._connection.is_closed:
            await self._connection.close()
            logger.debug("RabbitMQ connection closed")
        self._connection = None
        self._channel = None
        self._exchange = None

    async def publish(self, topic: str, message: dict[str, Any]) -> None:
        """이벤트 발행.

        Raises:
            PublishError: 직렬화 실패 또는 재시도 소진
        """
        try:
            body = json.dumps(message).encode()
        except (TypeError, ValueError) as e:
            raise PublishError(topic, f"Message is not JSON serializable: {e}") from e

        log_ctx = {"topic": topic, "event": message.get("event")}

        for attempt in range(self._max_retries + 1):
            try:
                await self._ensure_connected()
                await self._send(topic, body)
                logger.debug("Lifecycle event published", extra=log_ctx)
                return

            except RETRYABLE_ERRORS as e:
                if attempt >= self._max_retries:
                    logger.error(
                        "Lifecycle event publish failed permanently",
                        extra={**log_ctx, "attempt": attempt + 1, "error": str(e)},
                    )
                    raise PublishError(topic, str(e) or type(e).__name__) from e

                # Calculate delay with exponential backoff + jitter
                delay = min(self._retry_base_delay * (2**attempt), self._retry_max_delay)
                delay = delay * (0.75 + random.random() * 0.5)
                logger.warning(
                    "Lifecycle event publish failed, retrying",
                    extra={
                        **log_ctx,
                        "attempt": attempt + 1,
                        "max_retries": self._max_retries,
                        "retry_delay_seconds": round(delay, 3),
                        "error": str(e),
                    },
                )
                await self._reset()
                await asyncio.sleep(delay)

            except Exception as e:
                # Unexpected error - don't retry
                logger.exception("Unexpected error publishing lifecycle event", extra=log_ctx)
                raise PublishError(topic, str(e) or type(e).__name__) from e

    async def _ensure_connected(self) -> None:
        """연결 확인 및 재연결."""
        if not self._connection or self._connection.is_closed or not self._exchange:
            await self.connect()

    async def _reset(self) -> None:
        """실패한 연결 정리 (다음 시도에서 재연결)."""
        try:
            await self.close()
        except Exception:
            logger.debug("Ignoring error while closing broken connection", exc_info=True)
            self._connection = None
            self._channel = None
            self._exchange = None

    async def _send(self, topic: str, body: bytes) -> None:
        if not self._exchange:
            raise RuntimeError("Exchange not initialized")

        message = Message(
            body=body,
            content_type="application/json",
            delivery_mode=DeliveryMode.PERSISTENT,
            timestamp=datetime.now(timezone.utc),
        )
        await self._exchange.publish(message, routing_key=topic, timeout=self._publish_timeout)
