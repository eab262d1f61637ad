"""Register Command.

회원가입 Use Case입니다. 계정만 생성하며 세션은 만들지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.session_auth.application.account.dto import RegisterRequest, RegisterResult
from apps.session_auth.domain.exceptions.account import AccountAlreadyExistsError
from apps.session_auth.domain.exceptions.validation import InvalidPasswordError
from apps.session_auth.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.session_auth.application.account.ports import AccountDirectory, PasswordHasher

logger = logging.getLogger(__name__)

# bcrypt 입력 한도
SECRET_MAX_BYTES = 72


class RegisterInteractor:
    """회원가입 Interactor.

    Workflow:
        1. 이메일 형식 / 비밀번호 길이 검증
        2. 중복 확인
        3. 비밀번호 해시
        4. 계정 생성
    """

    def __init__(
        self,
        account_directory: "AccountDirectory",
        password_hasher: "PasswordHasher",
    ) -> None:
        self._account_directory = account_directory
        self._password_hasher = password_hasher

    async def execute(self, request: RegisterRequest) -> RegisterResult:
        """회원가입 처리.

        Raises:
            InvalidEmailError: 이메일 형식 오류
            InvalidPasswordError: 빈 비밀번호 또는 72바이트 초과
            AccountAlreadyExistsError: 이미 등록된 이메일
        """
        email = Email(request.email)
        if not request.password:
            raise InvalidPasswordError("Password cannot be empty")
        if len(request.password.encode("utf-8")) > SECRET_MAX_BYTES:
            raise InvalidPasswordError(f"Password too long (max {SECRET_MAX_BYTES} bytes)")

        if await self._account_directory.find_by_identifier(email.value) is not None:
            raise AccountAlreadyExistsError()

        password_hash = await self._password_hasher.hash(request.password)
        account = await self._account_directory.create(email.value, password_hash)

        logger.info("Account registered", extra={"account_id": str(account.id)[:8]})
        return RegisterResult(account_id=account.id, email=account.email)
