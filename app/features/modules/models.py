"""
Module model: a top-level navigable feature area.
"""
from sqlalchemy import String, Text, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base, TimestampMixin, generate_ulid


DEFAULT_MODULE_ICON = "fas fa-cube"


class Module(Base, TimestampMixin):
    """
    A feature area grouping options (routes) in the navigation menu.

    `order` is an advisory sort key; duplicates are legal.
    """
    __tablename__ = "modules"

    id: Mapped[str] = mapped_column(String(26), primary_key=True, default=generate_ulid)

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    icon: Mapped[str] = mapped_column(String(100), nullable=False, default=DEFAULT_MODULE_ICON)
    order: Mapped[int] = mapped_column("display_order", Integer, nullable=False, default=1)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Module(id={self.id}, name={self.name!r}, order={self.order})>"
