"""SessionManager 단위 테스트.

메모리 저장소와 실제 RS256 코덱으로 로그인/로그아웃 흐름을 검증합니다.
"""

from __future__ import annotations

import asyncio
import uuid

import pytest

from apps.session_auth.application.session.dto import LoginRequest
from apps.session_auth.domain.exceptions import (
    AccountNotFoundError,
    InvalidSecretError,
    InvalidSessionError,
    InvalidTokenError,
    SessionLimitExceededError,
    SessionNotFoundError,
)


def _login(email: str = "a@x.com", password: str = "secret1", **kwargs) -> LoginRequest:
    return LoginRequest(email=email, password=password, **kwargs)


class TestLogin:
    """로그인 테스트."""

    @pytest.mark.asyncio
    async def test_login_issues_token_bound_to_account(self, manager, account, publisher) -> None:
        """토큰의 sub가 계정 ID와 일치."""
        # Act
        result = await manager.login(_login(device_info="Chrome", ip_address="1.2.3.4"))

        # Assert
        payload = manager.verify_token(result.token)
        assert payload.account_id == account.id
        assert payload.email == "a@x.com"
        assert result.active_session_count == 1

        topic, message = publisher.messages[0]
        assert topic == "login"
        assert message["event"] == "user_login"
        assert message["session_id"] == str(result.session_id)
        assert message["active_session_count"] == 1
        assert message["device_info"] == "Chrome"
        assert message["ip_address"] == "1.2.3.4"

    @pytest.mark.asyncio
    async def test_identifier_is_case_insensitive(self, manager, account) -> None:
        result = await manager.login(_login(email="A@X.COM"))

        assert manager.verify_token(result.token).account_id == account.id

    @pytest.mark.asyncio
    async def test_wrong_password_creates_nothing(
        self, manager, account, publisher, session_store
    ) -> None:
        """비밀번호 불일치: 세션/이벤트 없음."""
        with pytest.raises(InvalidSecretError):
            await manager.login(_login(password="wrong"))

        assert await session_store.count_active(account.id) == 0
        assert publisher.messages == []

    @pytest.mark.asyncio
    async def test_unknown_account_creates_nothing(self, manager, publisher) -> None:
        with pytest.raises(AccountNotFoundError):
            await manager.login(_login(email="nobody@x.com"))

        assert publisher.messages == []

    @pytest.mark.asyncio
    async def test_malformed_identifier_is_unknown_account(self, manager) -> None:
        with pytest.raises(AccountNotFoundError):
            await manager.login(_login(email="not-an-email"))

    @pytest.mark.asyncio
    async def test_limit_reached_rejects_without_side_effects(
        self, manager, account, publisher, session_store
    ) -> None:
        """한도 도달 시 토큰/세션/이벤트 없음."""
        # Arrange
        for _ in range(3):
            await manager.login(_login())
        publisher.messages.clear()

        # Act
        with pytest.raises(SessionLimitExceededError) as exc_info:
            await manager.login(_login())

        # Assert
        assert exc_info.value.limit == 3
        assert "3" in exc_info.value.message
        assert await session_store.count_active(account.id) == 3
        assert publisher.messages == []

    @pytest.mark.asyncio
    async def test_custom_limit(self, make_manager, account) -> None:
        manager = make_manager(max_sessions=1)
        await manager.login(_login())

        with pytest.raises(SessionLimitExceededError):
            await manager.login(_login())

    def test_limit_must_be_positive(self, make_manager) -> None:
        with pytest.raises(ValueError):
            make_manager(max_sessions=0)

    @pytest.mark.asyncio
    async def test_concurrent_logins_never_exceed_limit(
        self, manager, account, session_store, publisher
    ) -> None:
        """MAX+1 동시 로그인 → 정확히 MAX개 성공."""
        # Act
        results = await asyncio.gather(
            *(manager.login(_login()) for _ in range(manager.max_sessions + 1)),
            return_exceptions=True,
        )

        # Assert
        successes = [r for r in results if not isinstance(r, BaseException)]
        failures = [r for r in results if isinstance(r, BaseException)]
        assert len(successes) == manager.max_sessions
        assert len(failures) == 1
        assert isinstance(failures[0], SessionLimitExceededError)
        assert await session_store.count_active(account.id) == manager.max_sessions
        assert sorted(r.active_session_count for r in successes) == [1, 2, 3]
        assert publisher.events() == ["user_login"] * manager.max_sessions

    @pytest.mark.asyncio
    async def test_publish_failure_does_not_fail_login(self, make_manager, account, publisher) -> None:
        """이벤트 발행 실패는 커밋된 로그인을 되돌리지 않음."""
        publisher.fail = True
        manager = make_manager()

        result = await manager.login(_login())

        sessions = await manager.list_sessions(account.id)
        assert [s.id for s in sessions] == [result.session_id]


class TestLogout:
    """로그아웃 테스트."""

    @pytest.mark.asyncio
    async def test_logout_removes_session_and_emits(self, manager, account, publisher) -> None:
        result = await manager.login(_login())

        await manager.logout(result.token)

        assert await manager.list_sessions(account.id) == []
        topic, message = publisher.messages[-1]
        assert topic == "logout"
        assert message == {
            "event": "user_logout",
            "account_id": str(account.id),
            "session_id": str(result.session_id),
            "timestamp": message["timestamp"],
        }

    @pytest.mark.asyncio
    async def test_second_logout_is_invalid_session(self, manager, account) -> None:
        result = await manager.login(_login())
        await manager.logout(result.token)

        with pytest.raises(InvalidSessionError):
            await manager.logout(result.token)

    @pytest.mark.asyncio
    async def test_unknown_token_is_invalid_session(self, manager) -> None:
        with pytest.raises(InvalidSessionError):
            await manager.logout("garbage")

    @pytest.mark.asyncio
    async def test_concurrent_logout_succeeds_once(self, manager, account, publisher) -> None:
        result = await manager.login(_login())
        publisher.messages.clear()

        outcomes = await asyncio.gather(
            manager.logout(result.token),
            manager.logout(result.token),
            return_exceptions=True,
        )

        assert sum(1 for o in outcomes if o is None) == 1
        assert sum(1 for o in outcomes if isinstance(o, InvalidSessionError)) == 1
        assert publisher.events() == ["user_logout"]

    @pytest.mark.asyncio
    async def test_logout_frees_a_slot(self, manager, account) -> None:
        tokens = [(await manager.login(_login())).token for _ in range(3)]

        await manager.logout(tokens[0])
        result = await manager.login(_login())

        assert result.active_session_count == 3


class TestVerifyToken:
    """토큰 검증 테스트."""

    @pytest.mark.asyncio
    async def test_verify_does_not_consult_store(self, manager, account) -> None:
        """로그아웃 후에도 서명/만료가 유효하면 검증 성공."""
        result = await manager.login(_login())
        await manager.logout(result.token)

        assert manager.verify_token(result.token).account_id == account.id

    def test_verify_rejects_garbage(self, manager) -> None:
        with pytest.raises(InvalidTokenError):
            manager.verify_token("not.a.jwt")

    @pytest.mark.asyncio
    async def test_authenticate_rejects_logged_out_token(self, manager, account) -> None:
        result = await manager.login(_login())
        payload = await manager.authenticate(result.token)
        assert payload.account_id == account.id

        await manager.logout(result.token)

        with pytest.raises(InvalidSessionError):
            await manager.authenticate(result.token)


class TestSessionQueries:
    """세션 목록/개별 종료/전체 종료 테스트."""

    @pytest.mark.asyncio
    async def test_list_sessions_newest_first(self, manager, account) -> None:
        ids = []
        for device in ("one", "two", "three"):
            ids.append((await manager.login(_login(device_info=device))).session_id)
            await asyncio.sleep(0.002)

        sessions = await manager.list_sessions(account.id)

        assert [s.id for s in sessions] == list(reversed(ids))
        assert [s.device_info for s in sessions] == ["three", "two", "one"]

    @pytest.mark.asyncio
    async def test_list_sessions_empty(self, manager) -> None:
        assert await manager.list_sessions(uuid.uuid4()) == []

    @pytest.mark.asyncio
    async def test_logout_session_removes_one(self, manager, account, publisher) -> None:
        first = await manager.login(_login())
        second = await manager.login(_login())

        await manager.logout_session(account.id, first.session_id)

        assert [s.id for s in await manager.list_sessions(account.id)] == [second.session_id]
        assert publisher.events()[-1] == "user_logout"

    @pytest.mark.asyncio
    async def test_logout_session_rejects_foreign_session(
        self, manager, account, account_directory, password_hasher
    ) -> None:
        """다른 계정 소유의 세션은 존재하지 않는 것으로 처리."""
        # Arrange
        other = await account_directory.create("b@x.com", await password_hasher.hash("pw"))
        foreign = await manager.login(_login(email="b@x.com", password="pw"))

        # Act / Assert
        with pytest.raises(SessionNotFoundError):
            await manager.logout_session(account.id, foreign.session_id)
        assert len(await manager.list_sessions(other.id)) == 1

    @pytest.mark.asyncio
    async def test_logout_session_unknown_id(self, manager, account) -> None:
        with pytest.raises(SessionNotFoundError):
            await manager.logout_session(account.id, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_logout_all_on_empty_returns_zero(self, manager, publisher) -> None:
        account_id = uuid.uuid4()

        assert await manager.logout_all_sessions(account_id) == 0

        topic, message = publisher.messages[-1]
        assert topic == "logout"
        assert message["event"] == "user_logout_all"
        assert message["sessions_terminated"] == 0

    @pytest.mark.asyncio
    async def test_logout_all_leaves_other_accounts(
        self, manager, account, account_directory, password_hasher
    ) -> None:
        other = await account_directory.create("b@x.com", await password_hasher.hash("pw"))
        await manager.login(_login())
        await manager.login(_login(email="b@x.com", password="pw"))

        assert await manager.logout_all_sessions(account.id) == 1

        assert len(await manager.list_sessions(other.id)) == 1


class TestScenarios:
    """엔드투엔드 시나리오."""

    @pytest.mark.asyncio
    async def test_limit_then_logout_all(self, manager, account, publisher) -> None:
        """3회 로그인 → 4번째 거부 → 전체 로그아웃 3 → 목록 비어 있음."""
        # Arrange
        results = [await manager.login(_login()) for _ in range(3)]
        assert [r.active_session_count for r in results] == [1, 2, 3]

        # Act
        with pytest.raises(SessionLimitExceededError) as exc_info:
            await manager.login(_login())
        terminated = await manager.logout_all_sessions(account.id)

        # Assert
        assert "3" in exc_info.value.message
        assert terminated == 3
        assert await manager.list_sessions(account.id) == []
        assert publisher.events() == ["user_login"] * 3 + ["user_logout_all"]
        assert publisher.messages[-1][1]["sessions_terminated"] == 3

    @pytest.mark.asyncio
    async def test_login_logout_round_trip(self, manager, account) -> None:
        """로그인 후 로그아웃하면 세션 수가 원래대로 돌아옴."""
        before = len(await manager.list_sessions(account.id))

        result = await manager.login(_login())
        await manager.logout(result.token)

        assert len(await manager.list_sessions(account.id)) == before
