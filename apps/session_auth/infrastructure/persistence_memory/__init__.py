"""In-Memory Persistence Layer."""

from apps.session_auth.infrastructure.persistence_memory.session_store_memory import (
    InMemorySessionStore,
)

__all__ = ["InMemorySessionStore"]
