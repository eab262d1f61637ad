"""Account Exceptions."""

from apps.session_auth.domain.exceptions.base import DomainError


class AccountAlreadyExistsError(DomainError):
    """이미 등록된 이메일."""

    def __init__(self) -> None:
        super().__init__("Email already exists")
