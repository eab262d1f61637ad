"""Table definitions."""

from apps.session_auth.infrastructure.persistence_postgres.mappings.accounts import (
    accounts_table,
)

__all__ = ["accounts_table"]
