"""Domain Enums."""

from apps.session_auth.domain.enums.session_state import SessionState

__all__ = ["SessionState"]
