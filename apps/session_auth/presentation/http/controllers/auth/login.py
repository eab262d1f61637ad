"""Login Controller.

로그인 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Request

from apps.session_auth.application.session.dto import LoginRequest
from apps.session_auth.application.session.services import SessionManager
from apps.session_auth.presentation.http.schemas.auth import LoginBody, LoginResponse
from apps.session_auth.setup.dependencies import get_session_manager

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="로그인",
)
async def login(
    body: LoginBody,
    request: Request,
    manager: SessionManager = Depends(get_session_manager),
) -> LoginResponse:
    """자격 증명을 검증하고 새 세션을 발급합니다.

    계정당 활성 세션이 최대치에 도달하면 409를 반환합니다.
    """
    device_info = body.device_info or request.headers.get("user-agent")
    ip_address = body.ip_address or (request.client.host if request.client else None)

    result = await manager.login(
        LoginRequest(
            email=body.email,
            password=body.password,
            device_info=device_info,
            ip_address=ip_address,
        )
    )
    return LoginResponse(
        token=result.token,
        active_session_count=result.active_session_count,
        session_id=result.session_id,
    )
