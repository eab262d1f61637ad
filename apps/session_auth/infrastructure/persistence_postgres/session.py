"""PostgreSQL Session Management."""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.session_auth.infrastructure.persistence_postgres.registry import metadata


def get_async_engine() -> AsyncEngine:
    """AsyncEngine 생성.

    환경변수:
        - AUTH_DATABASE_URL: PostgreSQL 연결 URL
        - AUTH_DB_POOL_SIZE, AUTH_DB_MAX_OVERFLOW, AUTH_DB_POOL_RECYCLE
    """
    from apps.session_auth.setup.config import get_settings

    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
        echo=settings.db_echo,
    )


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_engine() -> AsyncEngine:
    """엔진 싱글톤."""
    global _engine
    if _engine is None:
        _engine = get_async_engine()
    return _engine


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            _get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends용 세션 제공자."""
    session_factory = _get_session_factory()
    async with session_factory() as session:
        yield session


async def create_schema() -> None:
    """auth 스키마와 테이블 생성 (존재하면 건너뜀)."""
    async with _get_engine().begin() as conn:
        await conn.execute(text("CREATE SCHEMA IF NOT EXISTS auth"))
        await conn.run_sync(metadata.create_all)


async def dispose_engine() -> None:
    """커넥션 풀 정리."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
