"""PostgreSQL Adapters."""

from apps.session_auth.infrastructure.persistence_postgres.adapters.account_directory_sqla import (
    SqlaAccountDirectory,
)

__all__ = ["SqlaAccountDirectory"]
