"""Account Entity.

Account Directory가 소유하는 계정입니다. 이 서비스는 존재 여부와 식별자만 참조합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


@dataclass
class Account:
    """계정 엔티티.

    Attributes:
        id: 계정 고유 식별자
        email: 로그인 식별자 (unique)
        password_hash: bcrypt 해시 (로그/응답에 노출 금지)
        created_at: 생성 시각
    """

    id: UUID
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
