"""
Role CRUD rules.
"""
from app.core.store.service import EntityService, require_text
from app.core.database.base import generate_ulid
from app.features.roles.models import Role, DEFAULT_ROLE_ICON
from app.features.roles.schemas import RoleCreate, RoleUpdate
from app.utils import get_logger


log = get_logger(__name__)


class RoleService(EntityService[Role]):
    model = Role
    label = "Role"
    update_schema = RoleUpdate
    required_fields = {"name": "Role name is required"}

    async def create(self, data: RoleCreate) -> Role:
        name = require_text(data.name, self.required_fields["name"])
        now = self.now()
        role = Role(
            id=generate_ulid(),
            name=name,
            icon=data.icon or DEFAULT_ROLE_ICON,
            description=data.description or "",
            is_active=data.is_active is not False,
            created_at=now,
            updated_at=now,
        )
        await self.store.add(role)
        log.info("Created role %s (%s)", role.id, role.name)
        return role
