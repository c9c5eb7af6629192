"""
Process-local entity store backed by dictionaries.
"""
import asyncio
from typing import Optional

from app.core.database.base import Base
from app.core.store.base import EntityStore, EntityT
from app.features.users.models import User


class MemoryEntityStore(EntityStore):
    """
    Keeps entities in insertion-ordered dicts, one per model class.

    Mutations are serialized with an ``asyncio.Lock`` so the store has a
    single writer at a time inside one event loop.
    """

    def __init__(self) -> None:
        self._tables: dict[type, dict[str, Base]] = {}
        self._lock = asyncio.Lock()

    def _table(self, model: type) -> dict[str, Base]:
        return self._tables.setdefault(model, {})

    async def list(self, model: type[EntityT]) -> list[EntityT]:
        return list(self._table(model).values())  # type: ignore[arg-type]

    async def get(self, model: type[EntityT], entity_id: str) -> Optional[EntityT]:
        return self._table(model).get(entity_id)  # type: ignore[return-value]

    async def add(self, entity: EntityT) -> EntityT:
        async with self._lock:
            self._table(type(entity))[entity.id] = entity
        return entity

    async def save(self, entity: EntityT) -> EntityT:
        async with self._lock:
            self._table(type(entity))[entity.id] = entity
        return entity

    async def delete(self, model: type[Base], entity_id: str) -> bool:
        async with self._lock:
            return self._table(model).pop(entity_id, None) is not None

    async def find_user_by_login(self, identifier: str) -> Optional[User]:
        for user in self._table(User).values():
            if user.username == identifier or user.email == identifier:
                return user  # type: ignore[return-value]
        return None
