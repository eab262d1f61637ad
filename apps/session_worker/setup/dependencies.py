"""Dependency Injection.

워커의 Composition Root입니다.
"""

from __future__ import annotations

import redis.asyncio as aioredis

from apps.session_worker.application.commands import RecordLifecycleCommand
from apps.session_worker.infrastructure.messaging import RabbitMQClient
from apps.session_worker.infrastructure.persistence_redis import RedisAuditStore
from apps.session_worker.presentation.adapters import ConsumerAdapter
from apps.session_worker.presentation.handlers import LoginEventHandler, LogoutEventHandler
from apps.session_worker.setup.config import Settings, get_settings


class Container:
    """의존성 컨테이너."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._redis: aioredis.Redis | None = None
        self._client: RabbitMQClient | None = None
        self._adapter: ConsumerAdapter | None = None

    async def init(self) -> None:
        """의존성 초기화."""
        # Redis 연결
        self._redis = aioredis.from_url(self._settings.redis_url, decode_responses=True)
        await self._redis.ping()

        # Application 생성 (DI)
        store = RedisAuditStore(
            self._redis,
            max_entries=self._settings.audit_max_entries,
            ttl_seconds=self._settings.audit_ttl_seconds,
        )
        command = RecordLifecycleCommand(store)

        # topic → handler 매핑 (1회 구성)
        self._adapter = ConsumerAdapter(
            [LoginEventHandler(command), LogoutEventHandler(command)]
        )

        self._client = RabbitMQClient(
            self._settings.amqp_url,
            exchange_name=self._settings.exchange_name,
            queue_name=self._settings.queue_name,
            routing_keys=self._adapter.topics,
            prefetch_count=self._settings.prefetch_count,
        )
        await self._client.connect()

    async def close(self) -> None:
        """리소스 정리."""
        if self._client:
            await self._client.close()
        if self._redis:
            await self._redis.aclose()

    @property
    def client(self) -> RabbitMQClient:
        """RabbitMQ Client."""
        if not self._client:
            raise RuntimeError("Container not initialized")
        return self._client

    @property
    def adapter(self) -> ConsumerAdapter:
        """Consumer Adapter."""
        if not self._adapter:
            raise RuntimeError("Container not initialized")
        return self._adapter
