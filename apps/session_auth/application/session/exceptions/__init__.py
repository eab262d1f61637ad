"""Session application exceptions."""

from apps.session_auth.application.session.exceptions.publish import PublishError

__all__ = ["PublishError"]
