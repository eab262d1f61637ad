"""Session Entity.

하나의 인증된 디바이스/클라이언트 바인딩을 나타냅니다.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from apps.session_auth.domain.enums.session_state import SessionState
from apps.session_auth.domain.exceptions.session import SessionStateError

UNKNOWN = "Unknown"


@dataclass
class Session:
    """세션 엔티티.

    Attributes:
        id: 세션 고유 식별자 (재사용되지 않음)
        account_id: 소유 계정 ID
        token: 서명된 세션 토큰 (불변)
        device_info: 디바이스 정보 (기본 "Unknown")
        ip_address: 접속 IP (기본 "Unknown")
        created_at: 생성 시각 (불변)
        last_activity: 마지막 활동 시각
        state: 생명주기 상태
    """

    id: UUID
    account_id: UUID
    token: str = field(repr=False)
    device_info: str = UNKNOWN
    ip_address: str = UNKNOWN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_activity: datetime | None = None
    state: SessionState = SessionState.ACTIVE

    def __post_init__(self) -> None:
        self.device_info = self.device_info or UNKNOWN
        self.ip_address = self.ip_address or UNKNOWN
        if self.last_activity is None:
            self.last_activity = self.created_at

    @classmethod
    def open(
        cls,
        *,
        account_id: UUID,
        token: str,
        device_info: str | None = None,
        ip_address: str | None = None,
    ) -> Session:
        """새 ACTIVE 세션 생성. 항상 새 ID를 발급합니다."""
        return cls(
            id=uuid.uuid4(),
            account_id=account_id,
            token=token,
            device_info=device_info or UNKNOWN,
            ip_address=ip_address or UNKNOWN,
        )

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def terminate(self) -> None:
        """세션 종료 (ACTIVE -> TERMINATED)."""
        if self.state != SessionState.ACTIVE:
            raise SessionStateError(self.state.value, SessionState.TERMINATED.value)
        self.state = SessionState.TERMINATED

    def to_record(self) -> dict[str, Any]:
        """저장소 직렬화용 딕셔너리."""
        return {
            "id": str(self.id),
            "account_id": str(self.account_id),
            "token": self.token,
            "device_info": self.device_info,
            "ip_address": self.ip_address,
            "created_at": self.created_at.isoformat(),
            "last_activity": self.last_activity.isoformat() if self.last_activity else None,
        }

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> Session:
        """저장소 레코드에서 복원. 저장된 세션은 항상 ACTIVE입니다."""
        last_activity = data.get("last_activity")
        return cls(
            id=UUID(data["id"]),
            account_id=UUID(data["account_id"]),
            token=data["token"],
            device_info=data.get("device_info") or UNKNOWN,
            ip_address=data.get("ip_address") or UNKNOWN,
            created_at=datetime.fromisoformat(data["created_at"]),
            last_activity=datetime.fromisoformat(last_activity) if last_activity else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
