"""Event publishing exceptions."""

from apps.session_auth.application.common.exceptions.base import ApplicationError


class PublishError(ApplicationError):
    """이벤트 발행 실패 (치명적이지 않음).

    Session Manager 경계에서 기록 후 삼켜집니다.
    """

    def __init__(self, topic: str, reason: str) -> None:
        self.topic = topic
        self.reason = reason
        super().__init__(f"Failed to publish to topic {topic}: {reason}")
