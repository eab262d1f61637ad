"""AccountLockRegistry 테스트."""

from __future__ import annotations

import asyncio
import uuid

import pytest

from apps.session_auth.application.session.services import AccountLockRegistry


class TestAccountLockRegistry:
    """AccountLockRegistry 테스트."""

    @pytest.mark.asyncio
    async def test_same_account_is_serialized(self) -> None:
        registry = AccountLockRegistry()
        account_id = uuid.uuid4()
        inside = 0
        peak = 0

        async def critical() -> None:
            nonlocal inside, peak
            async with registry.hold(account_id):
                inside += 1
                peak = max(peak, inside)
                await asyncio.sleep(0.01)
                inside -= 1

        await asyncio.gather(*(critical() for _ in range(5)))

        assert peak == 1

    @pytest.mark.asyncio
    async def test_different_accounts_do_not_block(self) -> None:
        registry = AccountLockRegistry()
        first_entered = asyncio.Event()
        release = asyncio.Event()

        async def hold_first() -> None:
            async with registry.hold(uuid.uuid4()):
                first_entered.set()
                await release.wait()

        task = asyncio.create_task(hold_first())
        await first_entered.wait()

        async with registry.hold(uuid.uuid4()):
            assert len(registry) == 2

        release.set()
        await task

    @pytest.mark.asyncio
    async def test_locks_are_dropped_when_unused(self) -> None:
        registry = AccountLockRegistry()

        async with registry.hold(uuid.uuid4()):
            assert len(registry) == 1

        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_lock_released_on_error(self) -> None:
        registry = AccountLockRegistry()
        account_id = uuid.uuid4()

        with pytest.raises(ValueError):
            async with registry.hold(account_id):
                raise ValueError("boom")

        assert len(registry) == 0
        async with registry.hold(account_id):
            pass
