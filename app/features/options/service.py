"""
Option CRUD rules, including referential checks against modules and roles.
"""
from typing import Any, Iterable, Mapping, Optional, Sequence

from app.core.errors import NotFoundError, ValidationError
from app.core.store.service import EntityService, require_text
from app.core.database.base import generate_ulid
from app.features.modules.models import Module
from app.features.modules.schemas import ModuleResponse
from app.features.options.models import Option, DEFAULT_OPTION_ICON
from app.features.options.schemas import OptionCreate, OptionUpdate, OptionResponse
from app.features.roles.models import Role
from app.features.roles.schemas import RoleResponse, RoleStub
from app.utils import get_logger


log = get_logger(__name__)


def unique_ids(ids: Iterable[str]) -> list[str]:
    """Drop repeated identifiers, keeping first occurrences in order."""
    return list(dict.fromkeys(ids))


class OptionService(EntityService[Option]):
    model = Option
    label = "Option"
    update_schema = OptionUpdate
    required_fields = {
        "name": "Option name is required",
        "route": "Route is required",
        "module_id": "Module is required",
    }

    async def _check_module(self, module_id: str) -> None:
        if await self.store.get(Module, module_id) is None:
            raise NotFoundError(f"Module {module_id} not found")

    async def _check_roles(self, role_ids: Sequence[str]) -> None:
        for role_id in role_ids:
            if await self.store.get(Role, role_id) is None:
                raise NotFoundError(f"Role {role_id} not found")

    async def create(self, data: OptionCreate) -> Option:
        """
        Create an option under an existing module.

        Validation and reference checks run before anything is stored, so a
        failed create never leaves a partial option behind.
        """
        name = require_text(data.name, self.required_fields["name"])
        route = require_text(data.route, self.required_fields["route"])
        module_id = require_text(data.module_id, self.required_fields["module_id"])
        role_ids = unique_ids(data.role_ids or [])

        await self._check_module(module_id)
        await self._check_roles(role_ids)

        now = self.now()
        option = Option(
            id=generate_ulid(),
            name=name,
            route=route,
            icon=data.icon or DEFAULT_OPTION_ICON,
            order=data.order or 1,
            module_id=module_id,
            role_ids=role_ids,
            is_active=data.is_active is not False,
            created_at=now,
            updated_at=now,
        )
        await self.store.add(option)
        log.info("Created option %s (%s) in module %s", option.id, option.route, module_id)
        return option

    async def check_changes(self, changes: Mapping[str, Any]) -> None:
        if changes.get("module_id"):
            await self._check_module(changes["module_id"])
        if "role_ids" in changes:
            if changes["role_ids"] is None:
                raise ValidationError("Field 'roles' cannot be null")
            await self._check_roles(changes["role_ids"])

    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> Option:
        changes = dict(changes)
        if changes.get("role_ids") is not None:
            changes["role_ids"] = unique_ids(changes["role_ids"])
        return await super().update(entity_id, changes)

    async def populate(
        self,
        option: Option,
        modules: Optional[Mapping[str, Module]] = None,
        roles: Optional[Mapping[str, Role]] = None,
    ) -> OptionResponse:
        """Render an option with its module and roles as full sub-objects."""
        if modules is None:
            modules = await self.store.get_many(Module, [option.module_id])
        if roles is None:
            roles = await self.store.get_many(Role, option.role_ids)

        module = modules.get(option.module_id)
        populated_roles: list[RoleResponse | RoleStub] = []
        for role_id in option.role_ids:
            role = roles.get(role_id)
            if role is None:
                populated_roles.append(RoleStub(id=role_id))
            else:
                populated_roles.append(RoleResponse.model_validate(role))

        return OptionResponse(
            id=option.id,
            name=option.name,
            route=option.route,
            icon=option.icon,
            order=option.order,
            module=ModuleResponse.model_validate(module) if module is not None else None,
            roles=populated_roles,
            is_active=option.is_active,
            created_at=option.created_at,
            updated_at=option.updated_at,
        )

    async def list_populated(self) -> list[OptionResponse]:
        options = await self.list()
        modules = {m.id: m for m in await self.store.list(Module)}
        roles = {r.id: r for r in await self.store.list(Role)}
        return [await self.populate(option, modules, roles) for option in options]
