"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.

Lifetime:
    - 프로세스 싱글톤: 키, TokenCodec, 세션 저장소, 계정 Lock, 이벤트 발행자
    - 요청 단위: DB 세션, AccountDirectory, Use Case
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.session_auth.setup.config import Settings, get_settings

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from apps.session_auth.application.account.commands import RegisterInteractor
    from apps.session_auth.application.account.services import CredentialVerifier
    from apps.session_auth.application.session.ports import (
        EventPublisher,
        SessionStore,
        TokenCodec,
    )
    from apps.session_auth.application.session.services import (
        AccountLockRegistry,
        SessionManager,
    )
    from apps.session_auth.infrastructure.security import KeyManager


# ============================================================
# Process-wide Singletons
# ============================================================


@lru_cache
def get_key_manager() -> "KeyManager":
    """RSA 키 관리자 (기동 시 1회 로드).

    Raises:
        KeyMaterialError: 키 누락/파싱 실패/쌍 불일치
    """
    from apps.session_auth.infrastructure.security import KeyManager

    settings = get_settings()
    return KeyManager.load(
        private_key_pem=settings.jwt_private_key_pem,
        public_key_pem=settings.jwt_public_key_pem,
        private_key_path=settings.jwt_private_key_path,
        public_key_path=settings.jwt_public_key_path,
    )


@lru_cache
def get_token_codec() -> "TokenCodec":
    """TokenCodec 제공자."""
    from apps.session_auth.infrastructure.security import JwtTokenCodec

    settings = get_settings()
    key_manager = get_key_manager()
    return JwtTokenCodec(
        public_key_pem=key_manager.public_key_pem,
        private_key_pem=key_manager.private_key_pem,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expire_minutes=settings.access_token_exp_minutes,
    )


@lru_cache
def get_lock_registry() -> "AccountLockRegistry":
    """계정별 Lock 레지스트리 (프로세스 공유)."""
    from apps.session_auth.application.session.services import AccountLockRegistry

    return AccountLockRegistry()


@lru_cache
def get_session_store() -> "SessionStore":
    """SessionStore 제공자.

    환경변수:
        - AUTH_SESSION_STORE_BACKEND: redis (default) | memory
    """
    settings = get_settings()
    if settings.session_store_backend == "memory":
        from apps.session_auth.infrastructure.persistence_memory import InMemorySessionStore

        return InMemorySessionStore()

    from apps.session_auth.infrastructure.persistence_redis import (
        RedisSessionStore,
        get_session_redis,
    )

    return RedisSessionStore(get_session_redis())


# ============================================================
# Messaging Dependencies
# ============================================================


_event_publisher = None


async def init_event_publisher(settings: Settings) -> "EventPublisher":
    """EventPublisher 생성 및 연결 (lifespan에서 호출)."""
    global _event_publisher
    if _event_publisher is not None:
        return _event_publisher

    if not settings.amqp_url:
        from apps.session_auth.infrastructure.messaging import NullEventPublisher

        _event_publisher = NullEventPublisher()
        return _event_publisher

    from apps.session_auth.infrastructure.messaging import RabbitMQLifecycleEventPublisher

    publisher = RabbitMQLifecycleEventPublisher(
        settings.amqp_url,
        exchange_name=settings.events_exchange,
        max_retries=settings.publish_retry_attempts,
        retry_base_delay=settings.publish_retry_backoff_seconds,
        retry_max_delay=settings.publish_retry_max_delay,
    )
    _event_publisher = publisher
    await publisher.connect()
    return publisher


async def close_event_publisher() -> None:
    """EventPublisher 연결 종료 (lifespan에서 호출)."""
    global _event_publisher
    publisher, _event_publisher = _event_publisher, None
    close = getattr(publisher, "close", None)
    if close is not None:
        await close()


async def get_event_publisher(
    settings: Settings = Depends(get_settings),
) -> "EventPublisher":
    """EventPublisher 제공자 (싱글톤)."""
    if _event_publisher is None:
        return await init_event_publisher(settings)
    return _event_publisher


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.session_auth.infrastructure.persistence_postgres.session import (
        get_async_session,
    )

    async for session in get_async_session():
        yield session


async def get_account_directory(
    session: "AsyncSession" = Depends(get_db_session),
):
    """AccountDirectory 제공자."""
    from apps.session_auth.infrastructure.persistence_postgres.adapters import (
        SqlaAccountDirectory,
    )

    return SqlaAccountDirectory(session)


@lru_cache
def get_password_hasher():
    """PasswordHasher 제공자."""
    from apps.session_auth.infrastructure.security import BcryptPasswordHasher

    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


# ============================================================
# Use Case Dependencies
# ============================================================


def get_credential_verifier(
    account_directory=Depends(get_account_directory),
    password_hasher=Depends(get_password_hasher),
) -> "CredentialVerifier":
    """CredentialVerifier 제공자."""
    from apps.session_auth.application.account.services import CredentialVerifier

    return CredentialVerifier(account_directory, password_hasher)


def get_session_manager(
    credential_verifier: "CredentialVerifier" = Depends(get_credential_verifier),
    publisher: "EventPublisher" = Depends(get_event_publisher),
    session_store: "SessionStore" = Depends(get_session_store),
    token_codec: "TokenCodec" = Depends(get_token_codec),
    lock_registry: "AccountLockRegistry" = Depends(get_lock_registry),
    settings: Settings = Depends(get_settings),
) -> "SessionManager":
    """SessionManager 제공자."""
    from apps.session_auth.application.session.services import (
        LifecycleEventEmitter,
        SessionManager,
    )

    return SessionManager(
        credential_verifier=credential_verifier,
        event_emitter=LifecycleEventEmitter(publisher),
        session_store=session_store,
        token_codec=token_codec,
        lock_registry=lock_registry,
        max_sessions=settings.max_sessions,
    )


def get_register_interactor(
    account_directory=Depends(get_account_directory),
    password_hasher=Depends(get_password_hasher),
) -> "RegisterInteractor":
    """RegisterInteractor 제공자."""
    from apps.session_auth.application.account.commands import RegisterInteractor

    return RegisterInteractor(account_directory, password_hasher)
