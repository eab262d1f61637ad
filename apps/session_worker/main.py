"""Session Worker Entry Point.

로그인/로그아웃 생명주기 이벤트를 소비하여 계정별 감사 기록을 남기는 워커입니다.

Architecture:
    RabbitMQ (auth.lifecycle, topic: login | logout)
        │
        └── session-worker (이 모듈)
                │
                ├── ConsumerAdapter (topic → Handler)
                │
                └── RecordLifecycleCommand
                        │
                        └── RedisAuditStore (audit:sessions:{account_id})

Run:
    python -m apps.session_worker.main
"""

from __future__ import annotations

import asyncio
import logging
import signal

from apps.session_worker.setup.config import get_settings
from apps.session_worker.setup.dependencies import Container
from apps.session_worker.setup.logging import setup_logging

logger = logging.getLogger(__name__)


class SessionWorker:
    """Session Worker."""

    def __init__(self, container: Container | None = None) -> None:
        self._container = container or Container()

    async def start(self) -> None:
        """워커 시작."""
        settings = get_settings()
        logger.info(
            "Session Worker starting",
            extra={
                "service_name": settings.service_name,
                "service_version": settings.service_version,
                "env": settings.environment,
            },
        )

        try:
            # 의존성 초기화
            await self._container.init()
            logger.info("Dependencies initialized")

            # 시그널 핸들러 등록
            loop = asyncio.get_running_loop()
            for sig in (signal.SIGTERM, signal.SIGINT):
                loop.add_signal_handler(sig, self._handle_shutdown)

            # 이벤트 소비 시작 (종료 시그널까지 대기)
            await self._container.client.start_consuming(self._container.adapter.on_message)
        finally:
            await self._cleanup()

    def _handle_shutdown(self) -> None:
        """Graceful shutdown 핸들러."""
        logger.info("Shutdown signal received")
        self._container.client.stop()

    async def _cleanup(self) -> None:
        """리소스 정리."""
        try:
            stats = self._container.adapter.stats
        except RuntimeError:
            stats = {}
        logger.info("Shutting down", extra=stats)
        await self._container.close()
        logger.info("Session Worker stopped")


async def main() -> None:
    """Entry point."""
    setup_logging()
    worker = SessionWorker()
    await worker.start()


if __name__ == "__main__":
    asyncio.run(main())
