"""HTTP Controllers."""

from apps.session_auth.presentation.http.controllers.api_v1_router import (
    router as api_v1_router,
)
from apps.session_auth.presentation.http.controllers.root_router import router as root_router

__all__ = ["root_router", "api_v1_router"]
