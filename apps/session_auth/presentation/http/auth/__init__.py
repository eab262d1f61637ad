"""HTTP Auth Dependencies."""

from apps.session_auth.presentation.http.auth.dependencies import (
    get_bearer_token,
    get_current_account,
)

__all__ = ["get_bearer_token", "get_current_account"]
