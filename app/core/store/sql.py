"""
Entity store backed by an async SQLAlchemy session.
"""
from typing import Optional

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.base import Base
from app.core.store.base import EntityStore, EntityT
from app.features.users.models import User


class SqlEntityStore(EntityStore):
    """
    Persists entities through the request's ``AsyncSession``.

    Every mutation commits immediately so state written before an error is
    raised (e.g. the failed-login counter) survives the request rollback.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list(self, model: type[EntityT]) -> list[EntityT]:
        stmt = select(model).order_by(model.created_at, model.id)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, model: type[EntityT], entity_id: str) -> Optional[EntityT]:
        return await self.session.get(model, entity_id)

    async def add(self, entity: EntityT) -> EntityT:
        self.session.add(entity)
        await self.session.commit()
        return entity

    async def save(self, entity: EntityT) -> EntityT:
        self.session.add(entity)
        await self.session.commit()
        return entity

    async def delete(self, model: type[Base], entity_id: str) -> bool:
        entity = await self.session.get(model, entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        return True

    async def find_user_by_login(self, identifier: str) -> Optional[User]:
        stmt = select(User).where(or_(User.username == identifier, User.email == identifier))
        result = await self.session.execute(stmt)
        return result.scalars().first()
