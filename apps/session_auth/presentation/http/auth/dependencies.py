"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.
토큰 누락, 서명 오류, 폐기된 세션 모두 동일한 401 응답으로 변환됩니다.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header

from apps.session_auth.application.session.services import SessionManager
from apps.session_auth.domain.exceptions.auth import InvalidTokenError
from apps.session_auth.domain.value_objects.token_payload import TokenPayload
from apps.session_auth.setup.dependencies import get_session_manager


def _parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Bearer 토큰에서 실제 토큰 값을 추출합니다."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_bearer_token(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> str:
    """Authorization 헤더의 Bearer 토큰.

    Raises:
        InvalidTokenError: 헤더 누락 또는 형식 오류
    """
    token = _parse_bearer(authorization)
    if token is None:
        raise InvalidTokenError("missing bearer token")
    return token


async def get_current_account(
    token: str = Depends(get_bearer_token),
    manager: SessionManager = Depends(get_session_manager),
) -> TokenPayload:
    """현재 활성 세션의 토큰 클레임.

    Raises:
        InvalidTokenError, InvalidSessionError
    """
    return await manager.authenticate(token)
