"""JWT Token Codec.

TokenCodec 포트의 구현체입니다.
개인키로 서명하고 공개키로 검증합니다 (RS256).
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from apps.session_auth.application.session.ports import IssuedToken
from apps.session_auth.domain.exceptions.auth import InvalidTokenError
from apps.session_auth.domain.value_objects.token_payload import TokenPayload
from apps.session_auth.infrastructure.security.key_manager import KeyMaterialError

REQUIRED_CLAIMS = ("sub", "email", "jti", "iat", "exp")


class JwtTokenCodec:
    """JWT 토큰 코덱.

    TokenCodec 구현체. private_key_pem 없이 생성하면 검증 전용입니다.
    """

    def __init__(
        self,
        *,
        public_key_pem: str,
        private_key_pem: str | None = None,
        algorithm: str = "RS256",
        issuer: str = "session-auth",
        audience: str = "api",
        expire_minutes: int = 60,
    ) -> None:
        self._public_key = public_key_pem
        self._private_key = private_key_pem
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._expire = timedelta(minutes=expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def sign(self, *, account_id: uuid.UUID, email: str) -> IssuedToken:
        """토큰 서명."""
        if not self._private_key:
            raise KeyMaterialError("Token codec was created without a private key")

        jti = str(uuid.uuid4())
        now = self._now_timestamp()
        expires_at = now + int(self._expire.total_seconds())

        payload: dict[str, Any] = {
            "sub": str(account_id),
            "email": email,
            "jti": jti,
            "iat": now,
            "nbf": now,
            "exp": expires_at,
            "iss": self._issuer,
            "aud": self._audience,
        }

        token = jwt.encode(payload, self._private_key, algorithm=self._algorithm)
        return IssuedToken(token=token, jti=jti, issued_at=now, expires_at=expires_at)

    def verify(self, token: str) -> TokenPayload:
        """토큰 검증.

        서명, 만료, 형식 오류를 모두 InvalidTokenError 하나로 보고합니다.
        """
        try:
            claims = jwt.decode(
                token,
                self._public_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        missing = [claim for claim in REQUIRED_CLAIMS if claim not in claims]
        if missing:
            raise InvalidTokenError(f"Missing claims: {', '.join(missing)}")

        try:
            return TokenPayload(
                account_id=uuid.UUID(str(claims["sub"])),
                email=str(claims["email"]),
                jti=str(claims["jti"]),
                iat=int(claims["iat"]),
                exp=int(claims["exp"]),
            )
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed claims: {e}") from e
