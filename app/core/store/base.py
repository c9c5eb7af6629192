"""
Entity store interface.

The services and the permission assembler only talk to an ``EntityStore``,
so the in-memory store and the SQLAlchemy store are interchangeable.
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar

from app.core.database.base import Base
from app.features.users.models import User


EntityT = TypeVar("EntityT", bound=Base)


class EntityStore(ABC):
    """
    Flat collections of modules, options, roles and users.

    Listing returns entities in insertion order; lookups return ``None``
    for unknown identifiers.
    """

    @abstractmethod
    async def list(self, model: type[EntityT]) -> list[EntityT]:
        ...

    @abstractmethod
    async def get(self, model: type[EntityT], entity_id: str) -> Optional[EntityT]:
        ...

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        ...

    @abstractmethod
    async def save(self, entity: EntityT) -> EntityT:
        ...

    @abstractmethod
    async def delete(self, model: type[Base], entity_id: str) -> bool:
        """Remove an entity. Returns False when it did not exist."""

    @abstractmethod
    async def find_user_by_login(self, identifier: str) -> Optional[User]:
        """Find a user whose username or email equals ``identifier``."""

    async def get_many(self, model: type[EntityT], entity_ids: Sequence[str]) -> dict[str, EntityT]:
        """Resolve several identifiers at once; unknown ones are left out."""
        found: dict[str, EntityT] = {}
        for entity_id in entity_ids:
            if entity_id in found:
                continue
            entity = await self.get(model, entity_id)
            if entity is not None:
                found[entity_id] = entity
        return found
