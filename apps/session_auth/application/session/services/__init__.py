"""Session services."""

from apps.session_auth.application.session.services.account_lock import AccountLockRegistry
from apps.session_auth.application.session.services.lifecycle_events import (
    LOGIN_TOPIC,
    LOGOUT_TOPIC,
    LifecycleEventEmitter,
)
from apps.session_auth.application.session.services.session_manager import SessionManager

__all__ = [
    "AccountLockRegistry",
    "LOGIN_TOPIC",
    "LOGOUT_TOPIC",
    "LifecycleEventEmitter",
    "SessionManager",
]
