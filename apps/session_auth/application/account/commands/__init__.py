"""Account commands."""

from apps.session_auth.application.account.commands.register import RegisterInteractor

__all__ = ["RegisterInteractor"]
