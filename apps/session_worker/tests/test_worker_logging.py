"""Worker 로깅 테스트."""

from __future__ import annotations

import logging

import pytest

from apps.session_worker.setup.config import Settings
from apps.session_worker.setup.logging import TokenRedactionFilter, setup_logging


class TestTokenRedactionFilter:
    """토큰 제거 필터 테스트."""

    def test_removes_token_extra(self) -> None:
        record = logging.makeLogRecord(
            {"msg": "Audit entry appended", "token": "header.payload.sig", "event": "user_login"}
        )

        assert TokenRedactionFilter().filter(record) is True
        assert not hasattr(record, "token")
        assert record.event == "user_login"


class TestSetupLogging:
    """setup_logging 테스트."""

    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        factory = logging.getLogRecordFactory()
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.setLogRecordFactory(factory)

    def test_records_carry_service_metadata(self) -> None:
        settings = Settings(
            redis_url="redis://localhost:6379/3",
            amqp_url="amqp://localhost/",
            log_level="DEBUG",
            environment="test",
        )

        setup_logging(settings)
        record = logging.getLogger("x").makeRecord("x", logging.INFO, "f", 1, "m", None, None)

        assert record.service == {
            "name": "session-worker",
            "version": "1.0.0",
            "environment": "test",
        }
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("aio_pika").level == logging.WARNING

    def test_repeated_setup_does_not_stack_factories(self) -> None:
        first = Settings(redis_url="redis://r", amqp_url="amqp://a", environment="dev")
        second = Settings(redis_url="redis://r", amqp_url="amqp://a", environment="prod")

        setup_logging(first)
        installed = logging.getLogRecordFactory()
        setup_logging(second)

        assert logging.getLogRecordFactory() is installed
        record = logging.getLogger("x").makeRecord("x", logging.INFO, "f", 1, "m", None, None)
        assert record.service["environment"] == "prod"
