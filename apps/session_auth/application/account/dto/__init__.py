"""Account DTOs."""

from apps.session_auth.application.account.dto.register import RegisterRequest, RegisterResult

__all__ = ["RegisterRequest", "RegisterResult"]
