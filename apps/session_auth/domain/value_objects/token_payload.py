"""Token Payload Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """검증된 세션 토큰의 클레임.

    Attributes:
        account_id: 토큰 subject (계정 ID)
        email: 로그인에 사용된 식별자
        jti: 토큰 고유 ID
        iat: 발급 시각 (Unix timestamp)
        exp: 만료 시각 (Unix timestamp)
    """

    account_id: UUID
    email: str
    jti: str
    iat: int
    exp: int

    def to_dict(self) -> dict[str, str | int]:
        return {
            "sub": str(self.account_id),
            "email": self.email,
            "jti": self.jti,
            "iat": self.iat,
            "exp": self.exp,
        }
