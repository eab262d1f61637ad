from apps.session_worker.application.common.ports.audit_store import AuditStore

__all__ = ["AuditStore"]
