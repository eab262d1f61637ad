"""Audit Store Port."""

from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID


class AuditStore(Protocol):
    """계정별 생명주기 감사 기록 저장소."""

    async def append(self, account_id: UUID, entry: dict[str, Any]) -> None:
        """기록 추가 (최근 N건만 유지)."""
        ...
