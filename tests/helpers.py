"""Builders shared by the test modules."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from app.core.store.base import EntityStore
from app.features.modules.models import Module
from app.features.modules.schemas import ModuleCreate
from app.features.modules.service import ModuleService
from app.features.options.models import Option
from app.features.options.schemas import OptionCreate
from app.features.options.service import OptionService
from app.features.roles.models import Role
from app.features.roles.schemas import RoleCreate
from app.features.roles.service import RoleService
from app.features.users.models import User
from app.features.users.schemas import UserCreate
from app.features.users.service import UserService


ADMIN_PASSWORD = "admin123"


class FakeClock:
    """
    Deterministic clock; advance it to make timestamps move.

    With ``tick`` set, every reading moves the clock forward by that many
    milliseconds, so consecutive records get distinct timestamps.
    """

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc), tick: int = 0):
        self.current = start
        self.tick = tick

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(milliseconds=self.tick)
        return now

    def advance(self, seconds: int = 60) -> datetime:
        self.current += timedelta(seconds=seconds)
        return self.current


@dataclass
class Access:
    admin: Role
    treasurer: Role
    pastor: Role
    dashboard: Module
    requests: Module
    view_dashboard: Option
    create_request: Option
    list_requests: Option
    user: User


async def build_access(store: EntityStore, clock: FakeClock) -> Access:
    """
    Roles: Administrador, Tesorero, Pastor General (no options).
    Modules: Dashboard (orden 1), Solicitudes (orden 2).
    Options:
        /dashboard            Dashboard    [admin, treasurer]
        /solicitudes/crear    Solicitudes  [treasurer]       orden 1
        /solicitudes          Solicitudes  [admin, treasurer] orden 2
    User: admin / admin123 with the Administrador role.
    """
    roles = RoleService(store, clock)
    modules = ModuleService(store, clock)
    options = OptionService(store, clock)
    users = UserService(store, clock)

    admin = await roles.create(RoleCreate(name="Administrador", icon="fas fa-user-shield"))
    treasurer = await roles.create(RoleCreate(name="Tesorero", icon="fas fa-wallet"))
    pastor = await roles.create(RoleCreate(name="Pastor General"))

    dashboard = await modules.create(ModuleCreate(name="Dashboard", order=1))
    requests = await modules.create(ModuleCreate(name="Solicitudes", order=2))

    view_dashboard = await options.create(OptionCreate(
        name="Ver Dashboard", route="/dashboard", order=1,
        module_id=dashboard.id, role_ids=[admin.id, treasurer.id],
    ))
    create_request = await options.create(OptionCreate(
        name="Crear Solicitud", route="/solicitudes/crear", order=1,
        module_id=requests.id, role_ids=[treasurer.id],
    ))
    list_requests = await options.create(OptionCreate(
        name="Ver Solicitudes", route="/solicitudes", order=2,
        module_id=requests.id, role_ids=[admin.id, treasurer.id],
    ))

    user = await users.create(UserCreate(
        username="admin",
        email="admin@iglesia360.com",
        password=ADMIN_PASSWORD,
        person={"nombres": "Juan", "apellidos": "García"},
        role_ids=[admin.id],
    ))

    return Access(
        admin=admin,
        treasurer=treasurer,
        pastor=pastor,
        dashboard=dashboard,
        requests=requests,
        view_dashboard=view_dashboard,
        create_request=create_request,
        list_requests=list_requests,
        user=user,
    )
