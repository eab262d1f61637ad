"""Logout Controller.

로그아웃 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends

from apps.session_auth.application.session.services import SessionManager
from apps.session_auth.presentation.http.auth import get_bearer_token
from apps.session_auth.presentation.http.schemas.auth import MessageResponse
from apps.session_auth.setup.dependencies import get_session_manager

router = APIRouter()


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="로그아웃",
)
async def logout(
    token: str = Depends(get_bearer_token),
    manager: SessionManager = Depends(get_session_manager),
) -> MessageResponse:
    """Bearer 토큰에 해당하는 세션을 종료합니다."""
    await manager.logout(token)
    return MessageResponse(message="Successfully logged out")
