"""Redis Audit Store.

계정별 생명주기 감사 기록을 Redis List로 저장합니다.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

AUDIT_KEY_PREFIX = "audit:sessions:"
DEFAULT_MAX_ENTRIES = 100


class RedisAuditStore:
    """Redis 기반 감사 기록 저장소.

    AuditStore 인터페이스 구현체입니다.
    LPUSH + LTRIM을 하나의 트랜잭션 파이프라인으로 실행해 최근 N건만 유지합니다.
    """

    def __init__(
        self,
        redis: "aioredis.Redis",
        *,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        ttl_seconds: int | None = None,
    ) -> None:
        """Initialize.

        Args:
            redis: Redis 클라이언트
            max_entries: 계정당 보관할 최대 기록 수
            ttl_seconds: 마지막 기록 이후 보관 기간 (None이면 무기한)
        """
        self._redis = redis
        self._max_entries = max_entries
        self._ttl_seconds = ttl_seconds

    @staticmethod
    def _key(account_id: UUID) -> str:
        return f"{AUDIT_KEY_PREFIX}{account_id}"

    async def append(self, account_id: UUID, entry: dict[str, Any]) -> None:
        key = self._key(account_id)
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.lpush(key, json.dumps(entry))
            pipe.ltrim(key, 0, self._max_entries - 1)
            if self._ttl_seconds:
                pipe.expire(key, self._ttl_seconds)
            await pipe.execute()
        logger.debug(
            "Audit entry appended",
            extra={"account_id": str(account_id)[:8], "event": entry.get("event")},
        )
