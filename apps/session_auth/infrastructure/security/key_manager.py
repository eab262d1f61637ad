"""Key Manager.

RS256 서명용 RSA 키 쌍을 프로세스 시작 시 한 번 로드합니다.
키가 없거나 쌍이 맞지 않으면 KeyMaterialError로 기동을 중단합니다.
키 회전은 재시작 시 설정 변경으로 처리합니다.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

logger = logging.getLogger(__name__)

KEY_ID = "session-auth-key-01"


class KeyMaterialError(Exception):
    """서명 키 로드 실패 (기동 시 치명적 오류)."""


@dataclass(frozen=True)
class KeyPair:
    """PEM 인코딩된 RSA 키 쌍."""

    private_key_pem: str = field(repr=False)
    public_key_pem: str


def _read_pem(inline: str | None, path: str | None, name: str) -> str:
    if inline and inline.strip():
        return inline.strip()
    if path:
        key_path = Path(path)
        if key_path.is_file():
            return key_path.read_text(encoding="utf-8").strip()
    raise KeyMaterialError(f"{name} key is not configured")


class KeyManager:
    """RSA 키 관리자.

    Note:
        공개키만으로 검증하는 컴포넌트를 위해 JWKS를 제공합니다.
    """

    def __init__(self, key_pair: KeyPair) -> None:
        self._key_pair = key_pair
        try:
            private_key = serialization.load_pem_private_key(
                key_pair.private_key_pem.encode("utf-8"),
                password=None,
            )
            public_key = serialization.load_pem_public_key(
                key_pair.public_key_pem.encode("utf-8"),
            )
        except ValueError as e:
            raise KeyMaterialError(f"Unable to parse key material: {e}") from e

        if not isinstance(private_key, rsa.RSAPrivateKey) or not isinstance(
            public_key, rsa.RSAPublicKey
        ):
            raise KeyMaterialError("RS256 requires an RSA key pair")
        if private_key.public_key().public_numbers() != public_key.public_numbers():
            raise KeyMaterialError("Public key does not match private key")

        self._public_key = public_key

    @classmethod
    def load(
        cls,
        *,
        private_key_pem: str | None = None,
        public_key_pem: str | None = None,
        private_key_path: str | None = None,
        public_key_path: str | None = None,
    ) -> KeyManager:
        """설정값 또는 파일에서 키 쌍 로드.

        Raises:
            KeyMaterialError: 키 누락, 파싱 실패, 쌍 불일치
        """
        key_pair = KeyPair(
            private_key_pem=_read_pem(private_key_pem, private_key_path, "Private"),
            public_key_pem=_read_pem(public_key_pem, public_key_path, "Public"),
        )
        manager = cls(key_pair)
        logger.info("Signing key pair loaded", extra={"kid": KEY_ID})
        return manager

    @property
    def private_key_pem(self) -> str:
        return self._key_pair.private_key_pem

    @property
    def public_key_pem(self) -> str:
        return self._key_pair.public_key_pem

    def get_jwks(self) -> dict:
        """Return JWKS (JSON Web Key Set) for Public Key."""
        public_numbers = self._public_key.public_numbers()

        def to_base64url_uint(val: int) -> str:
            bytes_val = val.to_bytes((val.bit_length() + 7) // 8, byteorder="big")
            return base64.urlsafe_b64encode(bytes_val).decode("utf-8").rstrip("=")

        return {
            "keys": [
                {
                    "kty": "RSA",
                    "use": "sig",
                    "kid": KEY_ID,
                    "alg": "RS256",
                    "n": to_base64url_uint(public_numbers.n),
                    "e": to_base64url_uint(public_numbers.e),
                }
            ]
        }
