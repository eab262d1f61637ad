"""EventPublisher Port."""

from __future__ import annotations

from typing import Any, Protocol


class EventPublisher(Protocol):
    """생명주기 이벤트 전송 인터페이스.

    구현체:
        - RabbitMQLifecycleEventPublisher (infrastructure/messaging/)
        - NullEventPublisher (infrastructure/messaging/)
    """

    async def publish(self, topic: str, message: dict[str, Any]) -> None:
        """이벤트 발행.

        Args:
            topic: login | logout
            message: JSON 직렬화 가능한 메시지

        Raises:
            PublishError: 재시도 후에도 발행 실패
        """
        ...
