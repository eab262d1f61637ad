"""Messaging Infrastructure.

RabbitMQ 기반 이벤트 발행 구현체입니다.
"""

from apps.session_auth.infrastructure.messaging.lifecycle_event_publisher_rabbitmq import (
    RabbitMQLifecycleEventPublisher,
)
from apps.session_auth.infrastructure.messaging.null_event_publisher import NullEventPublisher

__all__ = ["NullEventPublisher", "RabbitMQLifecycleEventPublisher"]
