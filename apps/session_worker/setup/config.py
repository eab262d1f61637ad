"""Configuration.

환경 변수 기반 설정입니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    """워커 설정.

    환경 변수에서 로드됩니다.
    """

    # Redis
    redis_url: str

    # RabbitMQ
    amqp_url: str
    exchange_name: str = "auth.lifecycle"
    queue_name: str = "auth.lifecycle.audit"
    prefetch_count: int = 10

    # Audit trail
    audit_max_entries: int = 100
    audit_ttl_seconds: int | None = None

    # Logging
    log_level: str = "INFO"

    # Worker
    service_name: str = "session-worker"
    service_version: str = "1.0.0"
    environment: str = "dev"


def _optional_int(name: str) -> int | None:
    value = os.getenv(name)
    return int(value) if value else None


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 반환."""
    return Settings(
        redis_url=os.environ["AUTH_REDIS_URL"],
        amqp_url=os.environ["AUTH_AMQP_URL"],
        exchange_name=os.getenv("AUTH_EVENTS_EXCHANGE", "auth.lifecycle"),
        queue_name=os.getenv("AUTH_AUDIT_QUEUE", "auth.lifecycle.audit"),
        prefetch_count=int(os.getenv("AUTH_PREFETCH_COUNT", "10")),
        audit_max_entries=int(os.getenv("AUTH_AUDIT_MAX_ENTRIES", "100")),
        audit_ttl_seconds=_optional_int("AUTH_AUDIT_TTL_SECONDS"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        service_name=os.getenv("SERVICE_NAME", "session-worker"),
        service_version=os.getenv("SERVICE_VERSION", "1.0.0"),
        environment=os.getenv("ENVIRONMENT", "dev"),
    )
