"""Register DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class RegisterRequest:
    """회원가입 요청."""

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class RegisterResult:
    """회원가입 결과."""

    account_id: UUID
    email: str
