"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
extra로 전달된 민감 필드(token, password 등)는 마스킹됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.session_auth.setup.config import get_settings

SENSITIVE_FIELD_PATTERNS = ("password", "secret", "token", "authorization", "private_key")
MASK_PLACEHOLDER = "***"
MASK_MIN_LENGTH = 12
MASK_PRESERVE_PREFIX = 4

# LogRecord 기본 속성 (extra가 아닌 것)
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


def _is_sensitive_key(key: str) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in SENSITIVE_FIELD_PATTERNS)


def _mask_value(value: Any) -> str:
    if value is None:
        return MASK_PLACEHOLDER
    str_value = str(value)
    if len(str_value) <= MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{str_value[:MASK_PRESERVE_PREFIX]}{MASK_PLACEHOLDER}"


def mask_sensitive_data(data: dict[str, Any]) -> dict[str, Any]:
    """민감 키의 값을 마스킹한 사본 반환 (중첩 dict 포함)."""
    result = {}
    for key, value in data.items():
        if _is_sensitive_key(key):
            result[key] = _mask_value(value)
        elif isinstance(value, dict):
            result[key] = mask_sensitive_data(value)
        else:
            result[key] = value
    return result


class SensitiveDataFilter(logging.Filter):
    """LogRecord의 extra 필드 중 민감 정보를 마스킹합니다."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(vars(record).items()):
            if key in _RESERVED_ATTRS:
                continue
            if _is_sensitive_key(key):
                setattr(record, key, _mask_value(value))
            elif isinstance(value, dict):
                setattr(record, key, mask_sensitive_data(value))
        return True


def _install_record_factory(service: dict[str, Any]) -> None:
    current = logging.getLogRecordFactory()
    if isinstance(getattr(current, "service_metadata", None), dict):
        current.service_metadata = dict(service)
        return

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = current(*args, **kwargs)
        record.service = record_factory.service_metadata
        return record

    record_factory.service_metadata = dict(service)
    logging.setLogRecordFactory(record_factory)


def setup_logging() -> None:
    """로깅 설정."""
    settings = get_settings()

    # ECS JSON 포맷터
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())
    handler.addFilter(SensitiveDataFilter())

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가 (재호출 시 기존 factory를 다시 감싸지 않음)
    _install_record_factory(
        {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }
    )

    # 외부 라이브러리 로그 레벨 조정
    logging.getLogger("aio_pika").setLevel(logging.WARNING)
    logging.getLogger("aiormq").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
