"""Credential Verifier.

제출된 (identifier, secret) 쌍을 저장된 솔트 해시와 비교합니다.
비밀번호와 해시는 로그에 남기지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.session_auth.domain.exceptions.auth import AccountNotFoundError, InvalidSecretError
from apps.session_auth.domain.exceptions.validation import InvalidEmailError
from apps.session_auth.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.session_auth.application.account.ports import AccountDirectory, PasswordHasher
    from apps.session_auth.domain.entities.account import Account

logger = logging.getLogger(__name__)


class CredentialVerifier:
    """자격 증명 검증기."""

    def __init__(
        self,
        account_directory: "AccountDirectory",
        password_hasher: "PasswordHasher",
    ) -> None:
        self._account_directory = account_directory
        self._password_hasher = password_hasher

    async def verify(self, identifier: str, secret: str) -> "Account":
        """자격 증명 검증.

        Raises:
            AccountNotFoundError: 식별자에 해당하는 계정 없음
            InvalidSecretError: 비밀번호 불일치
        """
        try:
            email = Email(identifier)
        except InvalidEmailError as e:
            # 형식이 틀린 식별자는 존재할 수 없는 계정
            raise AccountNotFoundError() from e

        account = await self._account_directory.find_by_identifier(email.value)
        if account is None:
            logger.info("Login rejected: unknown account", extra={"identifier": repr(email)})
            raise AccountNotFoundError()

        if not await self._password_hasher.verify(secret, account.password_hash):
            logger.info(
                "Login rejected: invalid credentials",
                extra={"account_id": str(account.id)[:8]},
            )
            raise InvalidSecretError()

        return account
