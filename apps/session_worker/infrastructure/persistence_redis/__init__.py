from apps.session_worker.infrastructure.persistence_redis.audit_store_redis import (
    RedisAuditStore,
)

__all__ = ["RedisAuditStore"]
