"""Command Result.

감사 기록 처리 결과와 메시지 처리 방식(ack / requeue / drop)의 대응입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResultStatus(str, Enum):
    """처리 결과.

    | 상태 | 원인 | 메시지 처리 |
    |------|------|-------------|
    | RECORDED | 감사 기록 저장 | ack |
    | RETRY | 저장소 장애 | nack + requeue |
    | REJECTED | 형식 오류, 잘못된 topic | ack 후 버림 |
    """

    RECORDED = "recorded"
    RETRY = "retry"
    REJECTED = "rejected"


@dataclass(frozen=True)
class CommandResult:
    """Handler/Command가 반환하는 결과. requeue 여부만 ConsumerAdapter가 해석합니다."""

    status: ResultStatus
    reason: str | None = None

    @classmethod
    def success(cls) -> CommandResult:
        return cls(ResultStatus.RECORDED)

    @classmethod
    def retryable(cls, reason: str) -> CommandResult:
        return cls(ResultStatus.RETRY, reason)

    @classmethod
    def drop(cls, reason: str) -> CommandResult:
        return cls(ResultStatus.REJECTED, reason)

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.RECORDED

    @property
    def is_retryable(self) -> bool:
        return self.status is ResultStatus.RETRY

    @property
    def should_drop(self) -> bool:
        return self.status is ResultStatus.REJECTED
