"""Bcrypt Password Hasher.

PasswordHasher 포트의 구현체입니다.
bcrypt 연산은 CPU 바운드이므로 스레드에서 실행합니다.
"""

from __future__ import annotations

import asyncio
import logging

import bcrypt

from apps.session_auth.domain.exceptions.validation import InvalidPasswordError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 12
# bcrypt는 앞 72바이트만 사용하므로 그 이상은 받지 않음
BCRYPT_MAX_BYTES = 72


def _encode(secret: str) -> bytes:
    return secret.encode("utf-8")


class BcryptPasswordHasher:
    """bcrypt 기반 비밀번호 해시."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    async def hash(self, secret: str) -> str:
        """비밀번호 해시 생성.

        Raises:
            InvalidPasswordError: 72바이트 초과
        """
        encoded = _encode(secret)
        if len(encoded) > BCRYPT_MAX_BYTES:
            raise InvalidPasswordError(f"Password too long (max {BCRYPT_MAX_BYTES} bytes)")

        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, encoded, salt)
        return hashed.decode("utf-8")

    async def verify(self, secret: str, password_hash: str) -> bool:
        """저장된 해시와 비교.

        72바이트를 넘는 비밀번호와 손상된 해시는 불일치로 처리합니다.
        """
        encoded = _encode(secret)
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False
        try:
            return await asyncio.to_thread(bcrypt.checkpw, encoded, password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False
