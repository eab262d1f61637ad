from apps.session_worker.presentation.handlers.lifecycle_handler import LifecycleEventHandler
from apps.session_worker.presentation.handlers.login_handler import LoginEventHandler
from apps.session_worker.presentation.handlers.logout_handler import LogoutEventHandler

__all__ = ["LifecycleEventHandler", "LoginEventHandler", "LogoutEventHandler"]
