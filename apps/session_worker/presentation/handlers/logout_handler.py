"""Logout Handler."""

from __future__ import annotations

from apps.session_worker.application.common.dto.lifecycle_event import (
    USER_LOGOUT,
    USER_LOGOUT_ALL,
)
from apps.session_worker.presentation.handlers.lifecycle_handler import LifecycleEventHandler


class LogoutEventHandler(LifecycleEventHandler):
    """logout topic 핸들러 (user_logout, user_logout_all)."""

    topic = "logout"
    accepted_events = frozenset({USER_LOGOUT, USER_LOGOUT_ALL})
