"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.session_auth.presentation.http.controllers.auth.jwks import router as jwks_router
from apps.session_auth.presentation.http.controllers.auth.login import router as login_router
from apps.session_auth.presentation.http.controllers.auth.logout import router as logout_router
from apps.session_auth.presentation.http.controllers.auth.register import (
    router as register_router,
)
from apps.session_auth.presentation.http.controllers.auth.verify import router as verify_router

router = APIRouter()

router.include_router(register_router)
router.include_router(login_router)
router.include_router(logout_router)
router.include_router(verify_router)
router.include_router(jwks_router)
