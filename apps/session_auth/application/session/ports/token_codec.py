"""TokenCodec Port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from apps.session_auth.domain.value_objects.token_payload import TokenPayload


@dataclass(frozen=True)
class IssuedToken:
    """발급된 토큰."""

    token: str
    jti: str
    issued_at: int
    expires_at: int


class TokenCodec(Protocol):
    """세션 토큰 서명/검증 인터페이스.

    구현체:
        - JwtTokenCodec (infrastructure/security/)
    """

    def sign(self, *, account_id: UUID, email: str) -> IssuedToken:
        """토큰 서명 (개인키 필요)."""
        ...

    def verify(self, token: str) -> TokenPayload:
        """토큰 검증 (공개키만 필요).

        Raises:
            InvalidTokenError: 서명/만료/형식 오류
        """
        ...
