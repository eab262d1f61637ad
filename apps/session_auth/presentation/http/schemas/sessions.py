"""Session HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class SessionResponse(BaseModel):
    """세션 요약 (토큰 미포함)."""

    id: UUID = Field(..., description="세션 ID")
    device_info: str = Field(..., description="기기 정보")
    ip_address: str = Field(..., description="IP 주소")
    created_at: datetime = Field(..., description="생성 시각")
    last_activity: datetime | None = Field(None, description="마지막 활동 시각")

    model_config = {"from_attributes": True}


class SessionListResponse(BaseModel):
    """세션 목록 (created_at 내림차순)."""

    sessions: list[SessionResponse] = Field(default_factory=list)
    max_sessions: int = Field(..., description="계정당 최대 활성 세션 수")


class LogoutAllResponse(BaseModel):
    """전체 로그아웃 응답."""

    sessions_terminated: int = Field(..., description="종료된 세션 수")
