"""Redis Adapters."""

from apps.session_auth.infrastructure.persistence_redis.adapters.session_store_redis import (
    RedisSessionStore,
)

__all__ = ["RedisSessionStore"]
