"""Email Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.session_auth.domain.exceptions.validation import InvalidEmailError

# RFC 5322 간소화 버전
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")
EMAIL_MAX_LENGTH = 320


@dataclass(frozen=True, slots=True)
class Email:
    """이메일 Value Object.

    계정 식별자로 사용됩니다. 대소문자를 구분하지 않도록 소문자로 정규화합니다.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower() if self.value else ""
        object.__setattr__(self, "value", normalized)
        self._validate()

    def _validate(self) -> None:
        if not self.value:
            raise InvalidEmailError("Email cannot be empty")
        if len(self.value) > EMAIL_MAX_LENGTH:
            raise InvalidEmailError(f"Email too long (max {EMAIL_MAX_LENGTH} characters)")
        if not EMAIL_PATTERN.match(self.value):
            raise InvalidEmailError("Invalid email format")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        local, domain = self.value.split("@")
        return f"Email({local[:2]}***@{domain})"
