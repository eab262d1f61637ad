"""SessionStore Port.

활성 세션의 유일한 진실 원천입니다.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from apps.session_auth.domain.entities.session import Session


class SessionStore(Protocol):
    """세션 저장소 인터페이스.

    구현체:
        - RedisSessionStore (infrastructure/persistence_redis/adapters/)
        - InMemorySessionStore (infrastructure/persistence_memory/)
    """

    async def count_active(self, account_id: UUID) -> int:
        """계정의 활성 세션 수."""
        ...

    async def add(self, session: Session, *, max_sessions: int) -> int:
        """세션 저장 (원자적 개수 확인 + 삽입).

        Returns:
            삽입 후 계정의 활성 세션 수

        Raises:
            SessionLimitExceededError: 이미 max_sessions개의 세션이 존재
        """
        ...

    async def find_by_token(self, token: str) -> Session | None:
        """토큰 정확 일치로 세션 조회."""
        ...

    async def find_for_account(self, account_id: UUID, session_id: UUID) -> Session | None:
        """계정 소유권을 포함한 세션 조회."""
        ...

    async def list_for_account(self, account_id: UUID) -> list[Session]:
        """계정의 세션 목록 (created_at 내림차순)."""
        ...

    async def remove(self, session: Session) -> bool:
        """세션 제거.

        Returns:
            이번 호출이 제거했으면 True, 이미 없었으면 False
        """
        ...

    async def remove_all(self, account_id: UUID) -> int:
        """계정의 모든 세션 제거.

        Returns:
            제거된 세션 수 (없으면 0)
        """
        ...
