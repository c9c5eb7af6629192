"""
Role model: a named permission group assigned to users.
"""
from sqlalchemy import String, Text, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base, TimestampMixin, generate_ulid


DEFAULT_ROLE_ICON = "fas fa-user-tag"


class Role(Base, TimestampMixin):
    """
    Role granted to users and referenced by options.

    Examples: Administrador, Tesorero, Pastor General
    """
    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(26), primary_key=True, default=generate_ulid)

    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    icon: Mapped[str] = mapped_column(String(100), nullable=False, default=DEFAULT_ROLE_ICON)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name!r})>"
