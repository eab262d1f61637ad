"""Session Manager.

로그인/로그아웃/세션 조회 Use Case를 오케스트레이션합니다.

Architecture:
    - UseCase(지휘자): SessionManager
    - Services(연주자): CredentialVerifier, LifecycleEventEmitter
    - Ports(인프라): SessionStore, TokenCodec

Concurrency:
    "개수 확인 → 토큰 발급 → 삽입"은 계정 Lock 안에서 수행되고,
    저장소의 add()가 한도를 원자적으로 다시 확인합니다.
    이벤트 발행은 저장소 커밋 이후, Lock 밖에서 수행합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.session_auth.application.session.dto import LoginRequest, LoginResult, SessionSummary
from apps.session_auth.domain.entities.session import Session
from apps.session_auth.domain.exceptions.auth import InvalidSessionError
from apps.session_auth.domain.exceptions.session import (
    SessionLimitExceededError,
    SessionNotFoundError,
)

if TYPE_CHECKING:
    from apps.session_auth.application.account.services import CredentialVerifier
    from apps.session_auth.application.session.ports import SessionStore, TokenCodec
    from apps.session_auth.application.session.services.account_lock import (
        AccountLockRegistry,
    )
    from apps.session_auth.application.session.services.lifecycle_events import (
        LifecycleEventEmitter,
    )
    from apps.session_auth.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)


class SessionManager:
    """세션 매니저 (지휘자).

    Dependencies:
        Services (연주자):
            - credential_verifier: 자격 증명 검증
            - event_emitter: 생명주기 이벤트 발행

        Ports (인프라):
            - session_store: 세션 저장소
            - token_codec: 토큰 서명/검증
    """

    def __init__(
        self,
        *,
        # Services (연주자)
        credential_verifier: "CredentialVerifier",
        event_emitter: "LifecycleEventEmitter",
        # Ports (인프라)
        session_store: "SessionStore",
        token_codec: "TokenCodec",
        # Concurrency
        lock_registry: "AccountLockRegistry",
        max_sessions: int,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._credential_verifier = credential_verifier
        self._event_emitter = event_emitter
        self._session_store = session_store
        self._token_codec = token_codec
        self._locks = lock_registry
        self._max_sessions = max_sessions

    @property
    def max_sessions(self) -> int:
        return self._max_sessions

    async def login(self, request: LoginRequest) -> LoginResult:
        """로그인.

        Workflow:
            1. 자격 증명 검증 (실패는 그대로 전파)
            2. 활성 세션 수 확인 (한도 도달 시 SessionLimitExceededError)
            3. 토큰 발급
            4. 세션 저장
            5. user_login 이벤트 발행 (실패해도 롤백하지 않음)

        Raises:
            AccountNotFoundError, InvalidSecretError, SessionLimitExceededError
        """
        account = await self._credential_verifier.verify(request.email, request.password)

        async with self._locks.hold(account.id):
            count = await self._session_store.count_active(account.id)
            if count >= self._max_sessions:
                logger.info(
                    "Login rejected: session limit reached",
                    extra={"account_id": str(account.id)[:8], "limit": self._max_sessions},
                )
                raise SessionLimitExceededError(self._max_sessions)

            issued = self._token_codec.sign(account_id=account.id, email=account.email)
            session = Session.open(
                account_id=account.id,
                token=issued.token,
                device_info=request.device_info,
                ip_address=request.ip_address,
            )
            active_count = await self._session_store.add(
                session, max_sessions=self._max_sessions
            )

        logger.info(
            "User logged in",
            extra={
                "account_id": str(account.id)[:8],
                "session_id": str(session.id)[:8],
                "active_session_count": active_count,
            },
        )
        await self._event_emitter.user_login(
            account=account,
            session=session,
            active_session_count=active_count,
        )
        return LoginResult(
            token=issued.token,
            active_session_count=active_count,
            session_id=session.id,
        )

    async def logout(self, token: str) -> None:
        """토큰에 해당하는 세션 로그아웃.

        Raises:
            InvalidSessionError: 토큰에 해당하는 세션 없음
        """
        session = await self._session_store.find_by_token(token)
        if session is None:
            raise InvalidSessionError()

        await self._terminate(session, not_found=InvalidSessionError)

    def verify_token(self, token: str) -> "TokenPayload":
        """토큰 검증. 세션 저장소는 조회하지 않습니다.

        Raises:
            InvalidTokenError: 서명/만료/형식 오류
        """
        return self._token_codec.verify(token)

    async def authenticate(self, token: str) -> "TokenPayload":
        """토큰 검증 + 활성 세션 확인.

        세션 관리 엔드포인트용입니다. 로그아웃된 토큰은 서명이 유효해도 거부합니다.

        Raises:
            InvalidTokenError: 서명/만료/형식 오류
            InvalidSessionError: 토큰에 해당하는 활성 세션 없음
        """
        payload = self._token_codec.verify(token)
        session = await self._session_store.find_by_token(token)
        if session is None or session.account_id != payload.account_id:
            raise InvalidSessionError()
        return payload

    async def list_sessions(self, account_id: UUID) -> list[SessionSummary]:
        """계정의 세션 목록 (created_at 내림차순)."""
        sessions = await self._session_store.list_for_account(account_id)
        return [SessionSummary.from_session(session) for session in sessions]

    async def logout_session(self, account_id: UUID, session_id: UUID) -> None:
        """계정 소유의 특정 세션 로그아웃.

        Raises:
            SessionNotFoundError: 세션이 없거나 다른 계정 소유
        """
        session = await self._session_store.find_for_account(account_id, session_id)
        if session is None:
            raise SessionNotFoundError()

        await self._terminate(session, not_found=SessionNotFoundError)

    async def logout_all_sessions(self, account_id: UUID) -> int:
        """계정의 모든 세션 로그아웃.

        Returns:
            종료된 세션 수 (0 가능)
        """
        async with self._locks.hold(account_id):
            terminated = await self._session_store.remove_all(account_id)

        logger.info(
            "All sessions logged out",
            extra={"account_id": str(account_id)[:8], "sessions_terminated": terminated},
        )
        await self._event_emitter.user_logout_all(account_id, terminated)
        return terminated

    async def _terminate(
        self,
        session: Session,
        *,
        not_found: type[InvalidSessionError] | type[SessionNotFoundError],
    ) -> None:
        async with self._locks.hold(session.account_id):
            removed = await self._session_store.remove(session)
        if not removed:
            # 동시 로그아웃에서 다른 요청이 먼저 제거함
            raise not_found()

        session.terminate()
        logger.info(
            "User logged out",
            extra={
                "account_id": str(session.account_id)[:8],
                "session_id": str(session.id)[:8],
            },
        )
        await self._event_emitter.user_logout(session)
