"""
Module CRUD rules.
"""
from app.core.store.service import EntityService, require_text
from app.core.database.base import generate_ulid
from app.features.modules.models import Module, DEFAULT_MODULE_ICON
from app.features.modules.schemas import ModuleCreate, ModuleUpdate
from app.utils import get_logger


log = get_logger(__name__)


class ModuleService(EntityService[Module]):
    model = Module
    label = "Module"
    update_schema = ModuleUpdate
    required_fields = {"name": "Module name is required"}

    async def create(self, data: ModuleCreate) -> Module:
        """
        Create a module.

        A missing (or zero) `orden` places the module after the existing ones.
        """
        name = require_text(data.name, self.required_fields["name"])
        order = data.order or len(await self.store.list(Module)) + 1
        now = self.now()
        module = Module(
            id=generate_ulid(),
            name=name,
            description=data.description or "",
            icon=data.icon or DEFAULT_MODULE_ICON,
            order=order,
            is_active=data.is_active is not False,
            created_at=now,
            updated_at=now,
        )
        await self.store.add(module)
        log.info("Created module %s (%s)", module.id, module.name)
        return module
