"""
FastAPI dependencies for the entity store.
"""
from collections.abc import AsyncGenerator
from typing import Optional

from app.core import config
from app.core.database.engine import get_db
from app.core.store.base import EntityStore
from app.core.store.memory import MemoryEntityStore
from app.core.store.sql import SqlEntityStore


_memory_store: Optional[MemoryEntityStore] = None


def get_memory_store() -> MemoryEntityStore:
    """Process-wide memory store used when STORE_BACKEND=memory."""
    global _memory_store
    if _memory_store is None:
        _memory_store = MemoryEntityStore()
    return _memory_store


async def get_store() -> AsyncGenerator[EntityStore, None]:
    """
    Yield the configured entity store for one request.

    Usage in FastAPI routes:
        @router.get("/")
        async def list_roles(store: EntityStore = Depends(get_store)):
            ...
    """
    if config.STORE_BACKEND == "memory":
        yield get_memory_store()
        return
    async for session in get_db():
        yield SqlEntityStore(session)
