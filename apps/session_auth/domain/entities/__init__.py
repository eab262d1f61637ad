"""Domain Entities."""

from apps.session_auth.domain.entities.account import Account
from apps.session_auth.domain.entities.session import Session

__all__ = ["Account", "Session"]
