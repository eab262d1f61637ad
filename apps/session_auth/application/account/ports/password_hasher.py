"""PasswordHasher Port."""

from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """비밀번호 해시 인터페이스.

    구현체:
        - BcryptPasswordHasher (infrastructure/security/)
    """

    async def hash(self, secret: str) -> str:
        """비밀번호 해시 생성."""
        ...

    async def verify(self, secret: str, password_hash: str) -> bool:
        """저장된 해시와 비교 (constant-time)."""
        ...
