"""SQLAlchemy Account Directory.

AccountDirectory 포트의 구현체입니다.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError

from apps.session_auth.domain.entities.account import Account
from apps.session_auth.domain.exceptions.account import AccountAlreadyExistsError
from apps.session_auth.infrastructure.persistence_postgres.mappings.accounts import (
    accounts_table,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlaAccountDirectory:
    """SQLAlchemy 기반 Account Directory.

    AccountDirectory 구현체.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def find_by_identifier(self, identifier: str) -> Account | None:
        """이메일로 계정 조회."""
        stmt = select(accounts_table).where(accounts_table.c.email == identifier)
        result = await self._session.execute(stmt)
        row = result.mappings().one_or_none()
        if row is None:
            return None

        return Account(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=row["created_at"],
        )

    async def create(self, identifier: str, password_hash: str) -> Account:
        """계정 생성 후 커밋."""
        account = Account(
            id=uuid.uuid4(),
            email=identifier,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        stmt = insert(accounts_table).values(
            id=account.id,
            email=account.email,
            password_hash=account.password_hash,
            created_at=account.created_at,
        )
        try:
            await self._session.execute(stmt)
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise AccountAlreadyExistsError() from e
        return account
