"""In-Memory Session Store.

로컬 개발/테스트용 SessionStore 구현체입니다.
단일 프로세스 안에서만 일관성을 보장합니다.
"""

from __future__ import annotations

import asyncio
from uuid import UUID

from apps.session_auth.domain.entities.session import Session
from apps.session_auth.domain.exceptions.session import SessionLimitExceededError


def _copy(session: Session) -> Session:
    return Session.from_record(session.to_record())


class InMemorySessionStore:
    """메모리 기반 세션 저장소.

    모든 변경은 하나의 Lock 구간에서 수행됩니다.
    조회 결과는 복사본을 반환합니다.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._sessions: dict[UUID, Session] = {}
        self._by_token: dict[str, UUID] = {}
        self._by_account: dict[UUID, set[UUID]] = {}

    async def count_active(self, account_id: UUID) -> int:
        return len(self._by_account.get(account_id, ()))

    async def add(self, session: Session, *, max_sessions: int) -> int:
        async with self._lock:
            owned = self._by_account.setdefault(session.account_id, set())
            if len(owned) >= max_sessions:
                raise SessionLimitExceededError(max_sessions)
            if session.token in self._by_token:
                raise RuntimeError("Session token already registered")

            self._sessions[session.id] = _copy(session)
            self._by_token[session.token] = session.id
            owned.add(session.id)
            return len(owned)

    async def find_by_token(self, token: str) -> Session | None:
        session_id = self._by_token.get(token)
        if session_id is None:
            return None
        return _copy(self._sessions[session_id])

    async def find_for_account(self, account_id: UUID, session_id: UUID) -> Session | None:
        session = self._sessions.get(session_id)
        if session is None or session.account_id != account_id:
            return None
        return _copy(session)

    async def list_for_account(self, account_id: UUID) -> list[Session]:
        sessions = [self._sessions[sid] for sid in self._by_account.get(account_id, ())]
        sessions.sort(key=lambda s: s.created_at, reverse=True)
        return [_copy(session) for session in sessions]

    async def remove(self, session: Session) -> bool:
        async with self._lock:
            stored = self._sessions.pop(session.id, None)
            if stored is None:
                return False
            self._discard(stored)
            return True

    async def remove_all(self, account_id: UUID) -> int:
        async with self._lock:
            session_ids = self._by_account.pop(account_id, set())
            for session_id in session_ids:
                stored = self._sessions.pop(session_id)
                self._by_token.pop(stored.token, None)
            return len(session_ids)

    def _discard(self, stored: Session) -> None:
        self._by_token.pop(stored.token, None)
        owned = self._by_account.get(stored.account_id)
        if owned is not None:
            owned.discard(stored.id)
            if not owned:
                del self._by_account[stored.account_id]
