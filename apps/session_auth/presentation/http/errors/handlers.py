"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.session_auth.application.common.exceptions import ApplicationError
from apps.session_auth.domain.exceptions.account import AccountAlreadyExistsError
from apps.session_auth.domain.exceptions.auth import (
    AccountNotFoundError,
    InvalidSecretError,
    InvalidSessionError,
    InvalidTokenError,
)
from apps.session_auth.domain.exceptions.base import DomainError
from apps.session_auth.domain.exceptions.session import (
    SessionLimitExceededError,
    SessionNotFoundError,
)
from apps.session_auth.domain.exceptions.validation import InvalidEmailError, InvalidPasswordError

logger = logging.getLogger(__name__)

INVALID_SESSION_HEADERS = {"WWW-Authenticate": "Bearer"}


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(request: Request, exc: AccountNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "ACCOUNT_NOT_FOUND"},
        )

    @app.exception_handler(InvalidSecretError)
    async def invalid_secret_handler(request: Request, exc: InvalidSecretError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "code": "INVALID_CREDENTIALS"},
        )

    @app.exception_handler(SessionLimitExceededError)
    async def session_limit_handler(request: Request, exc: SessionLimitExceededError):
        return JSONResponse(
            status_code=409,
            content={
                "detail": exc.message,
                "code": "SESSION_LIMIT_EXCEEDED",
                "max_sessions": exc.limit,
            },
        )

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(request: Request, exc: InvalidTokenError):
        # 원인은 로그에만 남기고 응답은 InvalidSessionError와 동일
        logger.debug("Token rejected", extra={"reason": exc.reason})
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "code": "INVALID_SESSION"},
            headers=INVALID_SESSION_HEADERS,
        )

    @app.exception_handler(InvalidSessionError)
    async def invalid_session_handler(request: Request, exc: InvalidSessionError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "code": "INVALID_SESSION"},
            headers=INVALID_SESSION_HEADERS,
        )

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(request: Request, exc: SessionNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "SESSION_NOT_FOUND"},
        )

    @app.exception_handler(AccountAlreadyExistsError)
    async def account_exists_handler(request: Request, exc: AccountAlreadyExistsError):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "ACCOUNT_EXISTS"},
        )

    @app.exception_handler(InvalidEmailError)
    async def invalid_email_handler(request: Request, exc: InvalidEmailError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": "INVALID_EMAIL"},
        )

    @app.exception_handler(InvalidPasswordError)
    async def invalid_password_handler(request: Request, exc: InvalidPasswordError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": "INVALID_PASSWORD"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
