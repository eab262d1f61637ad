"""Domain Value Objects."""

from apps.session_auth.domain.value_objects.email import Email
from apps.session_auth.domain.value_objects.token_payload import TokenPayload

__all__ = ["Email", "TokenPayload"]
