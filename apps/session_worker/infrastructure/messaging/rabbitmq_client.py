"""RabbitMQ Client.

MQ 연결/채널/메시지 스트림을 담당하는 Infrastructure 컴포넌트입니다.

| 컴포넌트 | 계층 | 책임 |
|---------|------|------|
| RabbitMQClient | Infrastructure | MQ 연결/채널/메시지 스트림 |
| ConsumerAdapter | Presentation | decode/dispatch/ack-nack |
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Iterable

import aio_pika
from aio_pika import ExchangeType

if TYPE_CHECKING:
    from aio_pika.abc import (
        AbstractChannel,
        AbstractConnection,
        AbstractIncomingMessage,
        AbstractQueue,
    )

logger = logging.getLogger(__name__)


class RabbitMQClient:
    """RabbitMQ 클라이언트.

    auth.lifecycle Topic Exchange에 큐를 바인딩하고 메시지를 소비합니다.
    메시지 처리(decode/dispatch/ack)는 ConsumerAdapter에 위임합니다.
    """

    def __init__(
        self,
        amqp_url: str,
        *,
        exchange_name: str,
        queue_name: str,
        routing_keys: Iterable[str],
        prefetch_count: int = 10,
    ) -> None:
        """Initialize.

        Args:
            amqp_url: RabbitMQ 연결 URL
            exchange_name: Topic Exchange 이름
            queue_name: 소비할 큐 이름
            routing_keys: 바인딩할 routing key (topic) 목록
            prefetch_count: 한 번에 가져올 메시지 수
        """
        self._amqp_url = amqp_url
        self._exchange_name = exchange_name
        self._queue_name = queue_name
        self._routing_keys = tuple(routing_keys)
        self._prefetch_count = prefetch_count
        self._connection: AbstractConnection | None = None
        self._channel: AbstractChannel | None = None
        self._queue: AbstractQueue | None = None
        self._stopped = asyncio.Event()

    async def connect(self) -> None:
        """RabbitMQ 연결 및 큐 바인딩."""
        self._connection = await aio_pika.connect_robust(self._amqp_url)
        self._channel = await self._connection.channel()

        # Prefetch 설정 (한 번에 처리할 메시지 수)
        await self._channel.set_qos(prefetch_count=self._prefetch_count)

        exchange = await self._channel.declare_exchange(
            self._exchange_name,
            ExchangeType.TOPIC,
            durable=True,
        )

        self._queue = await self._channel.declare_queue(
            self._queue_name,
            durable=True,
            auto_delete=False,
            arguments={
                "x-dead-letter-exchange": "dlx",
                "x-dead-letter-routing-key": f"dlq.{self._queue_name}",
            },
        )

        for routing_key in self._routing_keys:
            await self._queue.bind(exchange, routing_key=routing_key)

        logger.info(
            "RabbitMQ connected",
            extra={
                "exchange": self._exchange_name,
                "queue": self._queue_name,
                "routing_keys": list(self._routing_keys),
            },
        )

    async def start_consuming(
        self,
        callback: Callable[["AbstractIncomingMessage"], Awaitable[None]],
    ) -> None:
        """메시지 소비 시작. close() 호출 시까지 대기합니다.

        Args:
            callback: 메시지 처리 콜백 (ConsumerAdapter.on_message)
        """
        if not self._queue:
            raise RuntimeError("Not connected. Call connect() first.")

        # no_ack=False: 수동 ack
        await self._queue.consume(callback, no_ack=False)
        logger.info("Started consuming messages")

        await self._stopped.wait()

    def stop(self) -> None:
        """소비 대기 해제 (시그널 핸들러에서 호출)."""
        self._stopped.set()

    async def close(self) -> None:
        """연결 종료."""
        self.stop()
        if self._connection and not self._connection.is_closed:
            await self._connection.close()
            logger.info("RabbitMQ connection closed")
        self._connection = None
        self._channel = None
        self._queue = None
