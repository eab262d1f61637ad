"""API v1 Router."""

from fastapi import APIRouter

from apps.session_auth.presentation.http.controllers.auth.router import router as auth_router
from apps.session_auth.presentation.http.controllers.general.router import (
    router as general_router,
)
from apps.session_auth.presentation.http.controllers.sessions.router import (
    router as sessions_router,
)

router = APIRouter()

# Auth endpoints
router.include_router(auth_router, prefix="/auth", tags=["auth"])

# Session management endpoints
router.include_router(sessions_router, prefix="/auth", tags=["sessions"])

# General endpoints (health)
router.include_router(general_router, tags=["general"])
