"""Auth HTTP Schemas."""

from uuid import UUID

from pydantic import BaseModel, Field


class RegisterBody(BaseModel):
    """회원가입 요청."""

    email: str = Field(..., min_length=3, max_length=320, description="이메일")
    password: str = Field(..., min_length=1, max_length=72, description="비밀번호 (72바이트 이하)")


class RegisterResponse(BaseModel):
    """회원가입 응답."""

    account_id: UUID = Field(..., description="계정 ID")
    email: str = Field(..., description="정규화된 이메일")


class LoginBody(BaseModel):
    """로그인 요청.

    device_info가 없으면 User-Agent, ip_address가 없으면 클라이언트 주소를 사용합니다.
    """

    email: str = Field(..., description="이메일")
    password: str = Field(..., description="비밀번호")
    device_info: str | None = Field(None, max_length=512, description="기기 정보")
    ip_address: str | None = Field(None, max_length=64, description="IP 주소")


class LoginResponse(BaseModel):
    """로그인 응답."""

    token: str = Field(..., description="RS256 세션 토큰")
    active_session_count: int = Field(..., description="로그인 후 활성 세션 수")
    session_id: UUID = Field(..., description="세션 ID")


class MessageResponse(BaseModel):
    """단순 결과 메시지."""

    message: str = Field(default="success", description="결과 메시지")


class TokenPayloadResponse(BaseModel):
    """검증된 토큰 클레임."""

    sub: UUID = Field(..., description="계정 ID")
    email: str = Field(..., description="이메일")
    jti: str = Field(..., description="토큰 ID")
    iat: int = Field(..., description="발급 시각 (Unix timestamp)")
    exp: int = Field(..., description="만료 시각 (Unix timestamp)")
