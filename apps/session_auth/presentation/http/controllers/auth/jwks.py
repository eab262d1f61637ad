"""JWKS Controller.

다른 서비스가 공개키만으로 토큰을 검증할 수 있도록 JWKS를 제공합니다.
"""

from fastapi import APIRouter, Depends

from apps.session_auth.infrastructure.security import KeyManager
from apps.session_auth.setup.dependencies import get_key_manager

router = APIRouter()


@router.get("/.well-known/jwks.json", summary="JWKS")
async def jwks(key_manager: KeyManager = Depends(get_key_manager)) -> dict:
    return key_manager.get_jwks()
