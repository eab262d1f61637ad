"""Account ports."""

from apps.session_auth.application.account.ports.account_directory import AccountDirectory
from apps.session_auth.application.account.ports.password_hasher import PasswordHasher

__all__ = ["AccountDirectory", "PasswordHasher"]
