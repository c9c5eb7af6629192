"""
Permission tree assembly.

Given the roles of an authenticated user, select for each role the options
that list it, group them by owning module and order both levels by their
advisory `order` (ties keep insertion order).

The result keeps one entry per role; options visible through several roles
appear under each of them.
"""
from typing import Iterable, Sequence

from app.core.errors import NotFoundError
from app.core.store.base import EntityStore
from app.features.modules.models import Module
from app.features.options.models import Option
from app.features.permissions.schemas import (
    ModuleGrant,
    PermissionModule,
    PermissionOption,
    PermissionRole,
    RoleGrant,
)
from app.features.roles.models import Role
from app.utils import get_logger


log = get_logger(__name__)


def assemble_permissions(
    roles: Iterable[Role],
    modules: Sequence[Module],
    options: Sequence[Option],
) -> list[RoleGrant]:
    """
    Build the permission tree.

    Args:
        roles: The user's roles, in the order they should be reported.
            Repeated roles are reported once.
        modules: All modules, in insertion order.
        options: All options, in insertion order.

    Options whose module no longer exists are skipped. Inactive entities are
    not filtered.
    """
    module_positions = {module.id: (module.order, position) for position, module in enumerate(modules)}
    modules_by_id = {module.id: module for module in modules}

    grants: list[RoleGrant] = []
    seen: set[str] = set()
    for role in roles:
        if role.id in seen:
            continue
        seen.add(role.id)

        grouped: dict[str, list[Option]] = {}
        for option in options:
            if role.id not in option.role_ids:
                continue
            if option.module_id not in modules_by_id:
                log.warning(
                    "Skipping option %s for role %s: module %s not found",
                    option.id, role.id, option.module_id,
                )
                continue
            grouped.setdefault(option.module_id, []).append(option)

        module_grants = [
            ModuleGrant(
                module=PermissionModule.model_validate(modules_by_id[module_id]),
                # sorted() is stable: equal orders keep insertion order
                options=[
                    PermissionOption.model_validate(option)
                    for option in sorted(grouped[module_id], key=lambda o: o.order)
                ],
            )
            for module_id in sorted(grouped, key=module_positions.__getitem__)
        ]
        grants.append(RoleGrant(role=PermissionRole.model_validate(role), modules=module_grants))

    return grants


class PermissionAssembler:
    """Resolves roles, modules and options from a store and assembles the tree."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def resolve_roles(self, role_ids: Sequence[str], strict: bool = False) -> list[Role]:
        """
        Resolve role identifiers in order, dropping repeats.

        Unknown identifiers raise NotFoundError when ``strict``; otherwise
        they are skipped with a warning.
        """
        roles: list[Role] = []
        for role_id in dict.fromkeys(role_ids):
            role = await self.store.get(Role, role_id)
            if role is None:
                if strict:
                    raise NotFoundError(f"Role {role_id} not found")
                log.warning("Skipping unknown role %s while assembling permissions", role_id)
                continue
            roles.append(role)
        return roles

    async def for_roles(self, role_ids: Sequence[str], strict: bool = False) -> list[RoleGrant]:
        roles = await self.resolve_roles(role_ids, strict=strict)
        modules = await self.store.list(Module)
        options = await self.store.list(Option)
        return assemble_permissions(roles, modules, options)
