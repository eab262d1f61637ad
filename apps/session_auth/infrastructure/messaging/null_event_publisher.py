"""Null Event Publisher.

AMQP URL이 설정되지 않은 환경(local, test)에서 사용합니다.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class NullEventPublisher:
    """이벤트를 전송하지 않고 로그만 남깁니다."""

    async def publish(self, topic: str, message: dict[str, Any]) -> None:
        logger.info(
            "Lifecycle event not sent (no broker configured)",
            extra={"topic": topic, "event": message.get("event")},
        )
