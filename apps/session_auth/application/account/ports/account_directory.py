"""AccountDirectory Port.

계정 저장소(외부 협력자)에 대한 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from typing import Protocol

from apps.session_auth.domain.entities.account import Account


class AccountDirectory(Protocol):
    """계정 디렉터리 인터페이스.

    구현체:
        - SqlaAccountDirectory (infrastructure/persistence_postgres/adapters/)
    """

    async def find_by_identifier(self, identifier: str) -> Account | None:
        """식별자(이메일)로 계정 조회.

        Args:
            identifier: 정규화된 이메일

        Returns:
            계정 엔티티 또는 None
        """
        ...

    async def create(self, identifier: str, password_hash: str) -> Account:
        """계정 생성.

        Args:
            identifier: 정규화된 이메일
            password_hash: 해시된 비밀번호

        Returns:
            생성된 계정 엔티티

        Raises:
            AccountAlreadyExistsError: 이미 존재하는 식별자
        """
        ...
