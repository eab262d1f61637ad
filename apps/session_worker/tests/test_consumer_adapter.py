"""ConsumerAdapter 테스트."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.session_worker.application.common.result import CommandResult
from apps.session_worker.presentation.adapters.consumer_adapter import ConsumerAdapter


def _make_handler(topic: str, result: CommandResult | None = None) -> MagicMock:
    handler = MagicMock()
    handler.topic = topic
    handler.handle = AsyncMock(return_value=result or CommandResult.success())
    return handler


def _make_message(topic: str, body: bytes) -> MagicMock:
    """RabbitMQ 메시지 Mock 생성."""
    message = MagicMock()
    message.routing_key = topic
    message.body = body
    message.ack = AsyncMock()
    message.nack = AsyncMock()
    return message


class TestConsumerAdapter:
    """ConsumerAdapter 테스트."""

    @pytest.fixture
    def login_handler(self) -> MagicMock:
        return _make_handler("login")

    @pytest.fixture
    def logout_handler(self) -> MagicMock:
        return _make_handler("logout")

    @pytest.fixture
    def adapter(self, login_handler: MagicMock, logout_handler: MagicMock) -> ConsumerAdapter:
        return ConsumerAdapter([login_handler, logout_handler])

    def test_topics(self, adapter: ConsumerAdapter) -> None:
        assert set(adapter.topics) == {"login", "logout"}

    def test_duplicate_topic_rejected(self) -> None:
        with pytest.raises(ValueError):
            ConsumerAdapter([_make_handler("login"), _make_handler("login")])

    @pytest.mark.asyncio
    async def test_dispatches_by_routing_key(
        self,
        adapter: ConsumerAdapter,
        login_handler: MagicMock,
        logout_handler: MagicMock,
        logout_data: dict[str, Any],
    ) -> None:
        """routing key에 해당하는 핸들러만 호출."""
        message = _make_message("logout", json.dumps(logout_data).encode())

        await adapter.on_message(message)

        logout_handler.handle.assert_awaited_once_with(logout_data)
        login_handler.handle.assert_not_awaited()
        message.ack.assert_awaited_once()
        assert adapter.stats["processed"] == 1

    @pytest.mark.asyncio
    async def test_retryable_nacks_with_requeue(
        self, login_data: dict[str, Any]
    ) -> None:
        adapter = ConsumerAdapter([_make_handler("login", CommandResult.retryable("down"))])
        message = _make_message("login", json.dumps(login_data).encode())

        await adapter.on_message(message)

        message.nack.assert_awaited_once_with(requeue=True)
        assert adapter.stats["retried"] == 1

    @pytest.mark.asyncio
    async def test_drop_acks(self, login_data: dict[str, Any]) -> None:
        adapter = ConsumerAdapter([_make_handler("login", CommandResult.drop("bad"))])
        message = _make_message("login", json.dumps(login_data).encode())

        await adapter.on_message(message)

        message.ack.assert_awaited_once()
        assert adapter.stats["dropped"] == 1

    @pytest.mark.asyncio
    async def test_unknown_topic_is_dropped(self, adapter: ConsumerAdapter) -> None:
        message = _make_message("signup", b"{}")

        await adapter.on_message(message)

        message.ack.assert_awaited_once()
        assert adapter.stats["dropped"] == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"not json", b"[1, 2]", b"\xff\xfe"])
    async def test_invalid_body_is_dropped(self, adapter: ConsumerAdapter, body: bytes) -> None:
        message = _make_message("login", body)

        await adapter.on_message(message)

        message.ack.assert_awaited_once()
        message.nack.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_error_requeues(self, login_data: dict[str, Any]) -> None:
        handler = _make_handler("login")
        handler.handle.side_effect = RuntimeError("bug")
        adapter = ConsumerAdapter([handler])
        message = _make_message("login", json.dumps(login_data).encode())

        await adapter.on_message(message)

        message.nack.assert_awaited_once_with(requeue=True)
