"""session_worker 테스트 공통 Fixtures."""

from __future__ import annotations

import uuid
from typing import Any
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def account_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def login_data(account_id: str) -> dict[str, Any]:
    """user_login 이벤트 샘플 데이터."""
    return {
        "event": "user_login",
        "account_id": account_id,
        "email": "a@x.com",
        "session_id": str(uuid.uuid4()),
        "token": "header.payload.signature",
        "active_session_count": 2,
        "device_info": "Chrome",
        "ip_address": "10.0.0.1",
        "timestamp": "2025-01-01T00:00:00+00:00",
    }


@pytest.fixture
def logout_data(account_id: str) -> dict[str, Any]:
    """user_logout 이벤트 샘플 데이터."""
    return {
        "event": "user_logout",
        "account_id": account_id,
        "session_id": str(uuid.uuid4()),
        "timestamp": "2025-01-01T00:05:00+00:00",
    }


@pytest.fixture
def logout_all_data(account_id: str) -> dict[str, Any]:
    """user_logout_all 이벤트 샘플 데이터."""
    return {
        "event": "user_logout_all",
        "account_id": account_id,
        "sessions_terminated": 3,
        "timestamp": "2025-01-01T00:10:00+00:00",
    }


@pytest.fixture
def mock_audit_store() -> AsyncMock:
    """Mock AuditStore."""
    store = AsyncMock()
    store.append = AsyncMock()
    return store
