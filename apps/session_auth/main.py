"""Session Auth API Application Entry Point.

Clean Architecture 기반 세션 인증 서비스입니다.

- RS256 세션 토큰 발급/검증
- 계정당 최대 활성 세션 수 제한
- 로그인/로그아웃 생명주기 이벤트 발행 (RabbitMQ)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.session_auth.presentation.http.controllers import root_router
from apps.session_auth.presentation.http.errors import register_exception_handlers
from apps.session_auth.setup.config import get_settings
from apps.session_auth.setup.dependencies import (
    close_event_publisher,
    get_key_manager,
    get_token_codec,
    init_event_publisher,
)
from apps.session_auth.setup.logging import setup_logging

logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings = get_settings()

    # Startup
    logger.info("Starting Session Auth API", extra={"max_sessions": settings.max_sessions})

    # 키 로드 실패(KeyMaterialError)는 기동 중단
    get_key_manager()
    get_token_codec()

    if settings.auto_create_schema:
        from apps.session_auth.infrastructure.persistence_postgres.session import create_schema

        await create_schema()
        logger.info("Database schema ensured")

    await init_event_publisher(settings)

    yield

    # Shutdown
    logger.info("Shutting down Session Auth API")
    await close_event_publisher()

    from apps.session_auth.infrastructure.persistence_postgres.session import dispose_engine

    await dispose_engine()

    if settings.session_store_backend == "redis":
        from apps.session_auth.infrastructure.persistence_redis import get_session_redis

        await get_session_redis().aclose()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        description="세션 토큰 인증 서비스 (Clean Architecture)",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    # CORS 설정
    cors_origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)

    # Health check (루트)
    @app.get("/health")
    async def root_health():
        return {"status": "healthy", "service": settings.service_name, "version": SERVICE_VERSION}

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.session_auth.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
