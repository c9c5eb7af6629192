"""
Shared CRUD service over an ``EntityStore``.

Services own the rules (required fields, partial-update merge, timestamps);
the store only keeps entities.
"""
from datetime import datetime, timezone
from typing import Any, Callable, ClassVar, Generic, Mapping, Optional

from pydantic import BaseModel

from app.core.errors import NotFoundError, ValidationError
from app.core.store.base import EntityStore, EntityT
from app.utils import get_logger


log = get_logger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def require_text(value: Optional[str], message: str) -> str:
    """Return ``value`` stripped, or raise ValidationError when absent or blank."""
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()


def merge_changes(
    entity: Any,
    changes: Mapping[str, Any],
    required: Optional[Mapping[str, str]] = None,
    wire_names: Optional[Mapping[str, str]] = None,
) -> list[str]:
    """
    Apply a partial update onto ``entity``.

    Only keys present in ``changes`` are touched; explicit ``False``, ``0``
    and ``""`` are applied like any other value. ``None`` is rejected: it is
    never a valid stored value. Fields listed in ``required`` (field name ->
    error message) must also be non-blank text. ``wire_names`` maps attribute
    names to the names clients send, for error messages.

    Returns the names of the applied fields.
    """
    required = required or {}
    wire_names = wire_names or {}
    values = {}
    for field, value in changes.items():
        if field in required:
            if isinstance(value, str) or value is None:
                value = require_text(value, required[field])
        elif value is None:
            raise ValidationError(f"Field '{wire_names.get(field, field)}' cannot be null")
        values[field] = value
    # Validate everything before touching the entity
    for field, value in values.items():
        setattr(entity, field, value)
    return list(values)


class EntityService(Generic[EntityT]):
    """
    List/get/update/delete for one entity type. Subclasses add ``create``.
    """
    model: ClassVar[type]
    label: ClassVar[str] = "Entity"
    required_fields: ClassVar[dict[str, str]] = {}
    update_schema: ClassVar[Optional[type[BaseModel]]] = None

    def __init__(self, store: EntityStore, clock: Clock = utcnow):
        self.store = store
        self.now = clock

    @classmethod
    def wire_names(cls) -> dict[str, str]:
        if cls.update_schema is None:
            return {}
        return {name: field.alias or name for name, field in cls.update_schema.model_fields.items()}

    async def list(self) -> list[EntityT]:
        return await self.store.list(self.model)

    async def get(self, entity_id: str) -> EntityT:
        entity = await self.store.get(self.model, entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found")
        return entity

    async def check_changes(self, changes: Mapping[str, Any]) -> None:
        """Hook for referential checks before an update is applied."""

    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> EntityT:
        entity = await self.get(entity_id)
        await self.check_changes(changes)
        applied = merge_changes(entity, changes, self.required_fields, self.wire_names())
        entity.updated_at = self.now()
        log.info("Updated %s %s fields=%s", self.label.lower(), entity_id, applied)
        return await self.store.save(entity)

    async def delete(self, entity_id: str) -> None:
        if not await self.store.delete(self.model, entity_id):
            raise NotFoundError(f"{self.label} not found")
        log.info("Deleted %s %s", self.label.lower(), entity_id)
