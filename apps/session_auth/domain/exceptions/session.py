"""Session Exceptions."""

from apps.session_auth.domain.exceptions.base import DomainError


class SessionLimitExceededError(DomainError):
    """계정당 최대 동시 세션 수 초과."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"Maximum number of active sessions ({limit}) reached. "
            "Log out from another device to free a slot and try again."
        )


class SessionNotFoundError(DomainError):
    """계정 소유의 세션을 찾을 수 없음."""

    def __init__(self) -> None:
        super().__init__("Session not found")


class SessionStateError(DomainError):
    """허용되지 않는 세션 상태 전이."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition session from {current} to {target}")
