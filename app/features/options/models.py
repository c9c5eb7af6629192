"""
Option model: a single route/page within a module, gated by role.
"""
from sqlalchemy import String, Integer, Boolean, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base, TimestampMixin, generate_ulid


DEFAULT_OPTION_ICON = "fas fa-circle"


class Option(Base, TimestampMixin):
    """
    A navigable route owned by exactly one module and visible to zero or more roles.

    The module and role references are plain identifiers (no foreign keys):
    deleting a module or role leaves the option in place with a dangling
    reference.
    """
    __tablename__ = "options"

    id: Mapped[str] = mapped_column(String(26), primary_key=True, default=generate_ulid)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    route: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    icon: Mapped[str] = mapped_column(String(100), nullable=False, default=DEFAULT_OPTION_ICON)
    order: Mapped[int] = mapped_column("display_order", Integer, nullable=False, default=1)

    module_id: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    role_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Option(id={self.id}, route={self.route!r}, module_id={self.module_id})>"
