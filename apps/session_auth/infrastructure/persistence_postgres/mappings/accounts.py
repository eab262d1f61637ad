"""Accounts Table.

타입 규칙 (Unbounded String 기본 전략):
    - TEXT: 기본 문자열 타입
"""

from sqlalchemy import Column, DateTime, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.session_auth.infrastructure.persistence_postgres.registry import mapper_registry

accounts_table = Table(
    "accounts",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", Text, nullable=False, unique=True, index=True),
    Column("password_hash", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    schema="auth",
)
