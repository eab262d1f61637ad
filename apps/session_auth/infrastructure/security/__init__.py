"""Security Infrastructure."""

from apps.session_auth.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from apps.session_auth.infrastructure.security.jwt_token_codec import JwtTokenCodec
from apps.session_auth.infrastructure.security.key_manager import (
    KeyManager,
    KeyMaterialError,
    KeyPair,
)

__all__ = [
    "BcryptPasswordHasher",
    "JwtTokenCodec",
    "KeyManager",
    "KeyMaterialError",
    "KeyPair",
]
