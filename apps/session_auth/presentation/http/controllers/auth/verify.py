"""Verify Controller.

토큰 서명/만료만 검증합니다. 세션 저장소는 조회하지 않습니다.
"""

from fastapi import APIRouter, Depends

from apps.session_auth.application.session.services import SessionManager
from apps.session_auth.presentation.http.auth import get_bearer_token
from apps.session_auth.presentation.http.schemas.auth import TokenPayloadResponse
from apps.session_auth.setup.dependencies import get_session_manager

router = APIRouter()


@router.get(
    "/verify",
    response_model=TokenPayloadResponse,
    summary="토큰 검증",
)
async def verify(
    token: str = Depends(get_bearer_token),
    manager: SessionManager = Depends(get_session_manager),
) -> TokenPayloadResponse:
    payload = manager.verify_token(token)
    return TokenPayloadResponse(**payload.to_dict())
