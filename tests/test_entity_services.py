"""Module, option and role services over the memory store."""
import pytest

from app.core.errors import NotFoundError, ValidationError
from app.features.modules.models import Module
from app.features.modules.schemas import ModuleCreate
from app.features.modules.service import ModuleService
from app.features.options.models import Option
from app.features.options.schemas import OptionCreate
from app.features.options.service import OptionService
from app.features.roles.schemas import RoleCreate, RoleStub
from app.features.roles.service import RoleService
from tests.helpers import build_access


pytestmark = pytest.mark.anyio


class TestModuleService:

    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_create_requires_name(self, store, clock, name):
        service = ModuleService(store, clock)

        with pytest.raises(ValidationError) as exc_info:
            await service.create(ModuleCreate(name=name))

        assert exc_info.value.message == "Module name is required"
        assert await store.list(Module) == []

    async def test_create_applies_defaults(self, store, clock):
        service = ModuleService(store, clock)
        await service.create(ModuleCreate(name="Dashboard"))

        module = await service.create(ModuleCreate(name="  Solicitudes  "))

        assert module.name == "Solicitudes"
        assert module.description == ""
        assert module.icon == "fas fa-cube"
        assert module.order == 2
        assert module.is_active is True
        assert module.created_at == module.updated_at == clock()

    async def test_create_keeps_explicit_inactive(self, store, clock):
        module = await ModuleService(store, clock).create(ModuleCreate(name="Legacy", is_active=False))

        assert module.is_active is False

    async def test_update_only_touches_given_fields(self, store, clock):
        service = ModuleService(store, clock)
        module = await service.create(ModuleCreate(name="m1", description="Primero", order=1))
        created_at = module.updated_at
        clock.advance()

        updated = await service.update(module.id, {"order": 5})

        assert updated.order == 5
        assert updated.name == "m1"
        assert updated.description == "Primero"
        assert updated.is_active is True
        assert updated.updated_at > created_at
        assert updated.created_at == created_at

    async def test_update_applies_explicit_false(self, store, clock):
        service = ModuleService(store, clock)
        module = await service.create(ModuleCreate(name="m1"))

        updated = await service.update(module.id, {"is_active": False})

        assert updated.is_active is False

    async def test_update_unknown_module(self, store, clock):
        with pytest.raises(NotFoundError):
            await ModuleService(store, clock).update("missing", {"order": 1})

    async def test_delete_twice_is_a_stable_not_found(self, store, clock):
        service = ModuleService(store, clock)
        keep = await service.create(ModuleCreate(name="keep"))
        drop = await service.create(ModuleCreate(name="drop"))

        await service.delete(drop.id)
        with pytest.raises(NotFoundError):
            await service.delete(drop.id)

        assert [m.id for m in await service.list()] == [keep.id]

    async def test_delete_does_not_cascade_to_options(self, store, clock):
        access = await build_access(store, clock)

        await ModuleService(store, clock).delete(access.requests.id)

        remaining = {o.id for o in await store.list(Option)}
        assert access.create_request.id in remaining
        assert access.list_requests.id in remaining


class TestRoleService:

    async def test_create_requires_name(self, store, clock):
        with pytest.raises(ValidationError) as exc_info:
            await RoleService(store, clock).create(RoleCreate(name=" "))

        assert exc_info.value.message == "Role name is required"

    async def test_create_defaults(self, store, clock):
        role = await RoleService(store, clock).create(RoleCreate(name="Tesorero"))

        assert role.icon == "fas fa-user-tag"
        assert role.description == ""
        assert role.is_active is True

    async def test_get_unknown_role(self, store, clock):
        with pytest.raises(NotFoundError) as exc_info:
            await RoleService(store, clock).get("nope")

        assert exc_info.value.message == "Role not found"


class TestOptionService:

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"route": "/x", "module_id": "m"}, "Option name is required"),
            ({"name": "X", "module_id": "m"}, "Route is required"),
            ({"name": "X", "route": "  ", "module_id": "m"}, "Route is required"),
            ({"name": "X", "route": "/x"}, "Module is required"),
        ],
    )
    async def test_create_requires_fields(self, store, clock, payload, message):
        with pytest.raises(ValidationError) as exc_info:
            await OptionService(store, clock).create(OptionCreate(**payload))

        assert exc_info.value.message == message

    async def test_create_unknown_module(self, store, clock):
        service = OptionService(store, clock)

        with pytest.raises(NotFoundError) as exc_info:
            await service.create(OptionCreate(name="X", route="/x", module_id="m404"))

        assert exc_info.value.message == "Module m404 not found"
        assert await store.list(Option) == []

    async def test_create_unknown_role_persists_nothing(self, store, clock):
        access = await build_access(store, clock)
        before = await store.list(Option)

        with pytest.raises(NotFoundError) as exc_info:
            await OptionService(store, clock).create(OptionCreate(
                name="X", route="/x", module_id=access.dashboard.id,
                role_ids=[access.admin.id, "r404"],
            ))

        assert exc_info.value.message == "Role r404 not found"
        assert await store.list(Option) == before

    async def test_create_defaults_and_deduplicates_roles(self, store, clock):
        access = await build_access(store, clock)

        option = await OptionService(store, clock).create(OptionCreate(
            name="Reportes", route="/reportes", module_id=access.dashboard.id,
            role_ids=[access.admin.id, access.admin.id],
        ))

        assert option.icon == "fas fa-circle"
        assert option.order == 1
        assert option.role_ids == [access.admin.id]

    async def test_update_checks_references(self, store, clock):
        access = await build_access(store, clock)
        service = OptionService(store, clock)

        with pytest.raises(NotFoundError):
            await service.update(access.view_dashboard.id, {"module_id": "m404"})
        with pytest.raises(NotFoundError):
            await service.update(access.view_dashboard.id, {"role_ids": ["r404"]})

        option = await service.get(access.view_dashboard.id)
        assert option.module_id == access.dashboard.id
        assert option.role_ids == [access.admin.id, access.treasurer.id]

    async def test_update_clears_roles_with_empty_list(self, store, clock):
        access = await build_access(store, clock)

        option = await OptionService(store, clock).update(access.view_dashboard.id, {"role_ids": []})

        assert option.role_ids == []

    async def test_update_rejects_blank_module(self, store, clock):
        access = await build_access(store, clock)

        with pytest.raises(ValidationError) as exc_info:
            await OptionService(store, clock).update(access.view_dashboard.id, {"module_id": ""})

        assert exc_info.value.message == "Module is required"

    async def test_populate_resolves_module_and_roles(self, store, clock):
        access = await build_access(store, clock)
        service = OptionService(store, clock)

        populated = await service.populate(access.view_dashboard)

        assert populated.module.id == access.dashboard.id
        assert [r.name for r in populated.roles] == ["Administrador", "Tesorero"]

    async def test_populate_renders_dangling_references(self, store, clock):
        access = await build_access(store, clock)
        await RoleService(store, clock).delete(access.treasurer.id)
        await ModuleService(store, clock).delete(access.dashboard.id)

        populated = await OptionService(store, clock).populate(access.view_dashboard)

        assert populated.module is None
        assert populated.roles[1] == RoleStub(id=access.treasurer.id)
        dumped = populated.model_dump(by_alias=True)
        assert dumped["roles"][1] == {"_id": access.treasurer.id}

    async def test_list_populated_keeps_insertion_order(self, store, clock):
        access = await build_access(store, clock)

        listed = await OptionService(store, clock).list_populated()

        assert [o.id for o in listed] == [
            access.view_dashboard.id,
            access.create_request.id,
            access.list_requests.id,
        ]
