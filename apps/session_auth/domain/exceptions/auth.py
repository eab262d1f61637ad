"""Authentication Exceptions.

토큰/세션 관련 예외는 외부에 동일한 메시지를 노출합니다.
만료, 서명 오류, 폐기 여부를 구분할 수 없어야 합니다.
"""

from apps.session_auth.domain.exceptions.base import DomainError

INVALID_SESSION_MESSAGE = "Invalid session"


class AccountNotFoundError(DomainError):
    """식별자에 해당하는 계정 없음."""

    def __init__(self) -> None:
        super().__init__("Account not found")


class InvalidSecretError(DomainError):
    """비밀번호 불일치."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class InvalidTokenError(DomainError):
    """서명/만료/형식 오류 토큰.

    reason은 로그 용도로만 보관하고 message는 항상 동일합니다.
    """

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(INVALID_SESSION_MESSAGE)


class InvalidSessionError(DomainError):
    """토큰에 해당하는 세션 없음 (이미 로그아웃된 토큰 포함)."""

    def __init__(self) -> None:
        super().__init__(INVALID_SESSION_MESSAGE)
