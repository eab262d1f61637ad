"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
import uuid
from datetime import datetime, timezone
from typing import Any, Generator
from unittest.mock import MagicMock, create_autospec

import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from apps.session_auth.application.account.services import CredentialVerifier
from apps.session_auth.application.session.exceptions import PublishError
from apps.session_auth.application.session.services import (
    AccountLockRegistry,
    LifecycleEventEmitter,
    SessionManager,
)
from apps.session_auth.domain.entities.account import Account
from apps.session_auth.infrastructure.persistence_memory import InMemorySessionStore
from apps.session_auth.infrastructure.security import JwtTokenCodec


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "AUTH_ENVIRONMENT": "test",
            "AUTH_SESSION_STORE_BACKEND": "memory",
            "AUTH_BCRYPT_ROUNDS": "4",
        }
    )
    yield
    os.environ.clear()
    os.environ.update(original)


# ============================================================
# Key Material
# ============================================================


def _generate_pem_pair() -> tuple[str, str]:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("utf-8")
    )
    return private_pem, public_pem


@pytest.fixture(scope="session")
def rsa_key_pair() -> tuple[str, str]:
    """테스트용 RSA 키 쌍 (private_pem, public_pem)."""
    return _generate_pem_pair()


@pytest.fixture(scope="session")
def other_rsa_key_pair() -> tuple[str, str]:
    """서명 불일치 검증용 별도 RSA 키 쌍."""
    return _generate_pem_pair()


@pytest.fixture
def token_codec(rsa_key_pair: tuple[str, str]) -> JwtTokenCodec:
    private_pem, public_pem = rsa_key_pair
    return JwtTokenCodec(public_key_pem=public_pem, private_key_pem=private_pem)


# ============================================================
# Fakes
# ============================================================


class PlainPasswordHasher:
    """테스트용 해시 (bcrypt 비용 없이 동작)."""

    async def hash(self, secret: str) -> str:
        return f"hashed::{secret}"

    async def verify(self, secret: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{secret}"


class InMemoryAccountDirectory:
    """테스트용 AccountDirectory."""

    def __init__(self) -> None:
        self.accounts: dict[str, Account] = {}

    async def find_by_identifier(self, identifier: str) -> Account | None:
        return self.accounts.get(identifier)

    async def create(self, identifier: str, password_hash: str) -> Account:
        account = Account(
            id=uuid.uuid4(),
            email=identifier,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self.accounts[identifier] = account
        return account


class RecordingPublisher:
    """발행된 메시지를 기록하는 EventPublisher."""

    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.messages: list[tuple[str, dict[str, Any]]] = []

    async def publish(self, topic: str, message: dict[str, Any]) -> None:
        if self.fail:
            raise PublishError(topic, "broker unavailable")
        self.messages.append((topic, message))

    def events(self) -> list[str]:
        return [message["event"] for _, message in self.messages]


@pytest.fixture
def password_hasher() -> PlainPasswordHasher:
    return PlainPasswordHasher()


@pytest.fixture
def account_directory() -> InMemoryAccountDirectory:
    return InMemoryAccountDirectory()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest_asyncio.fixture
async def account(
    account_directory: InMemoryAccountDirectory,
    password_hasher: PlainPasswordHasher,
) -> Account:
    """a@x.com / secret1 계정."""
    return await account_directory.create("a@x.com", await password_hasher.hash("secret1"))


@pytest.fixture
def make_manager(
    account_directory: InMemoryAccountDirectory,
    password_hasher: PlainPasswordHasher,
    publisher: RecordingPublisher,
    session_store: InMemorySessionStore,
    token_codec: JwtTokenCodec,
):
    """SessionManager 팩토리 (max_sessions 조정용)."""

    def _make(max_sessions: int = 3, **overrides: Any) -> SessionManager:
        deps: dict[str, Any] = {
            "credential_verifier": CredentialVerifier(account_directory, password_hasher),
            "event_emitter": LifecycleEventEmitter(publisher),
            "session_store": session_store,
            "token_codec": token_codec,
            "lock_registry": AccountLockRegistry(),
        }
        deps.update(overrides)
        return SessionManager(max_sessions=max_sessions, **deps)

    return _make


@pytest.fixture
def manager(make_manager) -> SessionManager:
    return make_manager()


@pytest.fixture
def mock_session_store() -> MagicMock:
    """Mock SessionStore."""
    from apps.session_auth.application.session.ports import SessionStore

    return create_autospec(SessionStore, instance=True)
