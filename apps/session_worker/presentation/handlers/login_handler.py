"""Login Handler."""

from __future__ import annotations

from apps.session_worker.application.common.dto.lifecycle_event import USER_LOGIN
from apps.session_worker.presentation.handlers.lifecycle_handler import LifecycleEventHandler


class LoginEventHandler(LifecycleEventHandler):
    """login topic 핸들러 (user_login)."""

    topic = "login"
    accepted_events = frozenset({USER_LOGIN})
