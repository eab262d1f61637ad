from apps.session_worker.application.common.dto.lifecycle_event import (
    USER_LOGIN,
    USER_LOGOUT,
    USER_LOGOUT_ALL,
    LifecycleEvent,
)

__all__ = ["LifecycleEvent", "USER_LOGIN", "USER_LOGOUT", "USER_LOGOUT_ALL"]
