"""Account Lock Registry.

계정 단위 상호 배제 구간을 제공합니다.
서로 다른 계정은 서로 다른 Lock을 사용하므로 경합하지 않습니다.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import UUID


class AccountLockRegistry:
    """계정 ID별 asyncio.Lock 레지스트리.

    대기자가 없어지면 Lock을 제거하여 레지스트리가 무한히 커지지 않습니다.
    단일 이벤트 루프 안에서만 사용합니다.
    """

    def __init__(self) -> None:
        self._locks: dict[UUID, asyncio.Lock] = {}
        self._holders: dict[UUID, int] = {}

    @asynccontextmanager
    async def hold(self, account_id: UUID) -> AsyncIterator[None]:
        """계정 Lock을 획득한 구간."""
        lock = self._locks.get(account_id)
        if lock is None:
            lock = self._locks[account_id] = asyncio.Lock()
        self._holders[account_id] = self._holders.get(account_id, 0) + 1

        try:
            async with lock:
                yield
        finally:
            self._holders[account_id] -= 1
            if self._holders[account_id] == 0:
                del self._holders[account_id]
                del self._locks[account_id]

    def __len__(self) -> int:
        return len(self._locks)
