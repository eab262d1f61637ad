"""Redis Session Store.

SessionStore 포트의 구현체입니다.

Key layout:
    session:{session_id}              세션 레코드 (JSON)
    session:token:{sha256(token)}     토큰 → session_id
    account:sessions:{account_id}     ZSET(session_id, score=created_at)

Note:
    세션 키에는 TTL을 두지 않습니다. 만료만 된 세션도 로그아웃 전까지
    계정 슬롯을 차지합니다 (ZSET 개수와 레코드 불일치 방지).
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.session_auth.domain.entities.session import Session
from apps.session_auth.domain.exceptions.session import SessionLimitExceededError
from apps.session_auth.infrastructure.persistence_redis.constants import (
    ACCOUNT_SESSIONS_KEY_PREFIX,
    ADD_DUPLICATE_TOKEN,
    ADD_LIMIT_REACHED,
    SESSION_KEY_PREFIX,
    SESSION_TOKEN_KEY_PREFIX,
)
from apps.session_auth.infrastructure.persistence_redis.scripts import (
    ADD_SESSION_SCRIPT,
    REMOVE_ALL_SESSIONS_SCRIPT,
    REMOVE_SESSION_SCRIPT,
)

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


def token_digest(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _session_key(session_id: UUID | str) -> str:
    return f"{SESSION_KEY_PREFIX}{session_id}"


def _token_key(token: str) -> str:
    return f"{SESSION_TOKEN_KEY_PREFIX}{token_digest(token)}"


def _account_key(account_id: UUID) -> str:
    return f"{ACCOUNT_SESSIONS_KEY_PREFIX}{account_id}"


class RedisSessionStore:
    """Redis 기반 세션 저장소.

    SessionStore 구현체.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis
        self._add_script = redis.register_script(ADD_SESSION_SCRIPT)
        self._remove_script = redis.register_script(REMOVE_SESSION_SCRIPT)
        self._remove_all_script = redis.register_script(REMOVE_ALL_SESSIONS_SCRIPT)

    async def count_active(self, account_id: UUID) -> int:
        """계정의 활성 세션 수."""
        return int(await self._redis.zcard(_account_key(account_id)))

    async def add(self, session: Session, *, max_sessions: int) -> int:
        """세션 저장 (원자적 개수 확인 + 삽입)."""
        record = session.to_record()
        record["token_digest"] = token_digest(session.token)

        result = int(
            await self._add_script(
                keys=[
                    _account_key(session.account_id),
                    _session_key(session.id),
                    _token_key(session.token),
                ],
                args=[
                    max_sessions,
                    str(session.id),
                    session.created_at.timestamp(),
                    json.dumps(record),
                ],
            )
        )

        if result == ADD_LIMIT_REACHED:
            raise SessionLimitExceededError(max_sessions)
        if result == ADD_DUPLICATE_TOKEN:
            raise RuntimeError("Session token already registered")
        return result

    async def find_by_token(self, token: str) -> Session | None:
        """토큰 정확 일치로 세션 조회."""
        session_id = await self._redis.get(_token_key(token))
        if not session_id:
            return None

        session = await self._load(session_id)
        # digest 충돌 방어: 원문 토큰까지 비교
        if session is None or session.token != token:
            return None
        return session

    async def find_for_account(self, account_id: UUID, session_id: UUID) -> Session | None:
        """계정 소유권을 포함한 세션 조회."""
        score = await self._redis.zscore(_account_key(account_id), str(session_id))
        if score is None:
            return None

        session = await self._load(str(session_id))
        if session is None or session.account_id != account_id:
            return None
        return session

    async def list_for_account(self, account_id: UUID) -> list[Session]:
        """계정의 세션 목록 (created_at 내림차순)."""
        session_ids = await self._redis.zrevrange(_account_key(account_id), 0, -1)
        if not session_ids:
            return []

        values = await self._redis.mget([_session_key(sid) for sid in session_ids])
        return [Session.from_record(json.loads(value)) for value in values if value]

    async def remove(self, session: Session) -> bool:
        """세션 제거 (이미 없으면 False)."""
        removed = await self._remove_script(
            keys=[
                _account_key(session.account_id),
                _session_key(session.id),
                _token_key(session.token),
            ],
            args=[str(session.id)],
        )
        return int(removed) == 1

    async def remove_all(self, account_id: UUID) -> int:
        """계정의 모든 세션 제거."""
        removed = await self._remove_all_script(
            keys=[_account_key(account_id)],
            args=[SESSION_KEY_PREFIX, SESSION_TOKEN_KEY_PREFIX],
        )
        return int(removed)

    async def _load(self, session_id: str) -> Session | None:
        value = await self._redis.get(_session_key(session_id))
        if not value:
            logger.warning(
                "Session index points to missing record",
                extra={"session_id": session_id[:8]},
            )
            return None
        return Session.from_record(json.loads(value))
