"""Session State."""

from enum import Enum


class SessionState(str, Enum):
    """세션 생명주기 상태.

    NONE -> ACTIVE -> TERMINATED (종료 상태, 재활성화 불가)
    """

    NONE = "none"
    ACTIVE = "active"
    TERMINATED = "terminated"
