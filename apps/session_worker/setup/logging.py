"""Logging Configuration.

워커 로그는 ECS JSON으로 stdout에 출력됩니다.
user_login 메시지에는 토큰이 포함되므로 로그 extra에서 token 필드를 제거합니다.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import ecs_logging

from apps.session_worker.setup.config import get_settings

if TYPE_CHECKING:
    from apps.session_worker.setup.config import Settings

REDACTED_FIELDS = frozenset({"token", "authorization"})
NOISY_LOGGERS = ("aio_pika", "aiormq", "redis")


class TokenRedactionFilter(logging.Filter):
    """extra로 들어온 토큰 필드를 제거합니다."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in REDACTED_FIELDS & vars(record).keys():
            delattr(record, field)
        return True


def _install_record_factory(settings: "Settings") -> None:
    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }
    current = logging.getLogRecordFactory()
    # 이미 설치된 경우 메타데이터만 교체
    if isinstance(getattr(current, "service_metadata", None), dict):
        current.service_metadata = service
        return

    def factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = current(*args, **kwargs)
        record.service = factory.service_metadata
        return record

    factory.service_metadata = service
    logging.setLogRecordFactory(factory)


def setup_logging(settings: "Settings | None" = None) -> None:
    """워커 로깅 설정."""
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())
    handler.addFilter(TokenRedactionFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level)

    _install_record_factory(settings)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
