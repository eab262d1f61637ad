"""Session ports."""

from apps.session_auth.application.session.ports.event_publisher import EventPublisher
from apps.session_auth.application.session.ports.session_store import SessionStore
from apps.session_auth.application.session.ports.token_codec import IssuedToken, TokenCodec

__all__ = ["EventPublisher", "IssuedToken", "SessionStore", "TokenCodec"]
