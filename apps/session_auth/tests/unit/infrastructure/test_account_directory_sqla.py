"""SqlaAccountDirectory 테스트.

AsyncSession을 Mock하여 매핑/예외 변환 로직을 테스트합니다.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from apps.session_auth.domain.exceptions import AccountAlreadyExistsError
from apps.session_auth.infrastructure.persistence_postgres.adapters import SqlaAccountDirectory


@pytest.fixture
def mock_session() -> AsyncMock:
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


def _result(row: dict | None) -> MagicMock:
    result = MagicMock()
    result.mappings.return_value.one_or_none.return_value = row
    return result


class TestSqlaAccountDirectory:
    """SqlaAccountDirectory 테스트."""

    @pytest.mark.asyncio
    async def test_find_by_identifier_maps_row(self, mock_session) -> None:
        row = {
            "id": uuid.uuid4(),
            "email": "a@x.com",
            "password_hash": "$2b$04$hash",
            "created_at": datetime.now(timezone.utc),
        }
        mock_session.execute.return_value = _result(row)

        account = await SqlaAccountDirectory(mock_session).find_by_identifier("a@x.com")

        assert account.id == row["id"]
        assert account.password_hash == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_find_by_identifier_missing(self, mock_session) -> None:
        mock_session.execute.return_value = _result(None)

        assert await SqlaAccountDirectory(mock_session).find_by_identifier("a@x.com") is None

    @pytest.mark.asyncio
    async def test_create_commits(self, mock_session) -> None:
        account = await SqlaAccountDirectory(mock_session).create("a@x.com", "hash")

        assert account.email == "a@x.com"
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_duplicate_rolls_back(self, mock_session) -> None:
        mock_session.execute.side_effect = IntegrityError("insert", {}, Exception("unique"))

        with pytest.raises(AccountAlreadyExistsError):
            await SqlaAccountDirectory(mock_session).create("a@x.com", "hash")

        mock_session.rollback.assert_awaited_once()
