"""Sessions Router.

현재 계정의 세션 조회/종료 엔드포인트입니다.
모든 엔드포인트는 활성 세션의 Bearer 토큰을 요구합니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from apps.session_auth.application.session.services import SessionManager
from apps.session_auth.domain.value_objects.token_payload import TokenPayload
from apps.session_auth.presentation.http.auth import get_current_account
from apps.session_auth.presentation.http.schemas.auth import MessageResponse
from apps.session_auth.presentation.http.schemas.sessions import (
    LogoutAllResponse,
    SessionListResponse,
    SessionResponse,
)
from apps.session_auth.setup.dependencies import get_session_manager

router = APIRouter()


@router.get(
    "/sessions",
    response_model=SessionListResponse,
    summary="세션 목록",
)
async def list_sessions(
    current: TokenPayload = Depends(get_current_account),
    manager: SessionManager = Depends(get_session_manager),
) -> SessionListResponse:
    summaries = await manager.list_sessions(current.account_id)
    return SessionListResponse(
        sessions=[SessionResponse.model_validate(summary) for summary in summaries],
        max_sessions=manager.max_sessions,
    )


@router.delete(
    "/sessions/{session_id}",
    response_model=MessageResponse,
    summary="특정 세션 로그아웃",
)
async def logout_session(
    session_id: UUID,
    current: TokenPayload = Depends(get_current_account),
    manager: SessionManager = Depends(get_session_manager),
) -> MessageResponse:
    """다른 계정의 세션 ID는 존재하지 않는 세션과 동일하게 404를 반환합니다."""
    await manager.logout_session(current.account_id, session_id)
    return MessageResponse(message="Session logged out")


@router.delete(
    "/sessions",
    response_model=LogoutAllResponse,
    summary="전체 세션 로그아웃",
)
async def logout_all_sessions(
    current: TokenPayload = Depends(get_current_account),
    manager: SessionManager = Depends(get_session_manager),
) -> LogoutAllResponse:
    terminated = await manager.logout_all_sessions(current.account_id)
    return LogoutAllResponse(sessions_terminated=terminated)
