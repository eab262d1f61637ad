"""Validation Exceptions."""

from apps.session_auth.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """값 검증 실패."""


class InvalidEmailError(ValidationError):
    """유효하지 않은 이메일."""


class InvalidPasswordError(ValidationError):
    """허용되지 않는 비밀번호 (빈 값 또는 72바이트 초과)."""
