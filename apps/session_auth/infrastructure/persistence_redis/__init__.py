"""Redis Persistence Layer."""

from apps.session_auth.infrastructure.persistence_redis.adapters import RedisSessionStore
from apps.session_auth.infrastructure.persistence_redis.client import get_session_redis

__all__ = ["RedisSessionStore", "get_session_redis"]
