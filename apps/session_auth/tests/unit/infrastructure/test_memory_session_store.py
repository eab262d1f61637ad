"""InMemorySessionStore 테스트."""

from __future__ import annotations

import uuid

import pytest

from apps.session_auth.domain.entities.session import Session
from apps.session_auth.domain.exceptions import SessionLimitExceededError
from apps.session_auth.infrastructure.persistence_memory import InMemorySessionStore


class TestInMemorySessionStore:
    """InMemorySessionStore 테스트."""

    @pytest.mark.asyncio
    async def test_add_enforces_limit(self) -> None:
        store = InMemorySessionStore()
        account_id = uuid.uuid4()

        counts = [
            await store.add(Session.open(account_id=account_id, token=f"t{i}"), max_sessions=2)
            for i in range(2)
        ]

        assert counts == [1, 2]
        with pytest.raises(SessionLimitExceededError):
            await store.add(Session.open(account_id=account_id, token="t3"), max_sessions=2)
        assert await store.count_active(account_id) == 2

    @pytest.mark.asyncio
    async def test_returned_sessions_are_copies(self) -> None:
        store = InMemorySessionStore()
        session = Session.open(account_id=uuid.uuid4(), token="tok")
        await store.add(session, max_sessions=3)

        found = await store.find_by_token("tok")
        found.terminate()

        again = await store.find_by_token("tok")
        assert again.is_active

    @pytest.mark.asyncio
    async def test_remove_is_idempotent(self) -> None:
        store = InMemorySessionStore()
        session = Session.open(account_id=uuid.uuid4(), token="tok")
        await store.add(session, max_sessions=3)

        assert await store.remove(session) is True
        assert await store.remove(session) is False
        assert await store.find_by_token("tok") is None
        assert await store.count_active(session.account_id) == 0

    @pytest.mark.asyncio
    async def test_remove_all(self) -> None:
        store = InMemorySessionStore()
        account_id = uuid.uuid4()
        for i in range(3):
            await store.add(Session.open(account_id=account_id, token=f"t{i}"), max_sessions=3)

        assert await store.remove_all(account_id) == 3
        assert await store.remove_all(account_id) == 0
        assert await store.find_by_token("t0") is None

    @pytest.mark.asyncio
    async def test_find_for_account_requires_owner(self) -> None:
        store = InMemorySessionStore()
        session = Session.open(account_id=uuid.uuid4(), token="tok")
        await store.add(session, max_sessions=3)

        assert await store.find_for_account(uuid.uuid4(), session.id) is None
        assert await store.find_for_account(session.account_id, session.id) == session
