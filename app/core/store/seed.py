"""
Default roles, modules, options and admin user.

Shared by the seed script (SQL backend) and the memory backend's startup
seeding. Idempotent: entities are matched by name (users by username).
"""
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
from app.features.users.schemas import UserCreate
from app.features.users.service import UserService
from app.utils import get_logger


log = get_logger(__name__)


DEFAULT_ROLES = [
    ("Administrador", "fas fa-user-shield", "Acceso completo al sistema"),
    ("Tesorero", "fas fa-wallet", "Gestión de finanzas"),
    ("Pastor General", "fas fa-cross", "Lider principal de la iglesia"),
]

DEFAULT_MODULES = [
    ("Dashboard", "Panel de control principal", "fas fa-tachometer-alt", 1),
    ("Solicitudes", "Gestión de solicitudes financieras", "fas fa-file-invoice-dollar", 2),
    ("Configuración", "Módulos, opciones y roles", "fas fa-cogs", 3),
]

# (name, route, icon, order, module, roles)
DEFAULT_OPTIONS = [
    ("Ver Dashboard", "/dashboard", "fas fa-chart-line", 1, "Dashboard", ["Administrador", "Tesorero"]),
    ("Crear Solicitud", "/solicitudes/crear", "fas fa-plus", 1, "Solicitudes", ["Tesorero"]),
    ("Ver Solicitudes", "/solicitudes", "fas fa-list", 2, "Solicitudes", ["Administrador", "Tesorero"]),
    ("Módulos", "/configuracion/modulos", "fas fa-cubes", 1, "Configuración", ["Administrador"]),
    ("Opciones", "/configuracion/opciones", "fas fa-stream", 2, "Configuración", ["Administrador"]),
    ("Roles", "/configuracion/roles", "fas fa-user-tag", 3, "Configuración", ["Administrador"]),
]

DEFAULT_ADMIN = {
    "username": "admin",
    "email": "admin@iglesia360.com",
    "password": "admin123",
    "person": {
        "nombres": "Juan",
        "apellidos": "García",
        "tipoDocumento": "DNI",
        "numeroDocumento": "12345678",
        "nombreCompleto": "Juan García",
    },
}


async def seed_demo_data(store: EntityStore, admin_password: str | None = None) -> None:
    """Create the default access configuration if it is missing."""
    role_service = RoleService(store)
    module_service = ModuleService(store)
    option_service = OptionService(store)
    user_service = UserService(store)

    roles = {role.name: role for role in await store.list(Role)}
    for name, icon, description in DEFAULT_ROLES:
        if name not in roles:
            roles[name] = await role_service.create(RoleCreate(name=name, icon=icon, description=description))

    modules = {module.name: module for module in await store.list(Module)}
    for name, description, icon, order in DEFAULT_MODULES:
        if name not in modules:
            modules[name] = await module_service.create(
                ModuleCreate(name=name, description=description, icon=icon, order=order)
            )

    existing_options = {option.name for option in await store.list(Option)}
    for name, route, icon, order, module_name, role_names in DEFAULT_OPTIONS:
        if name in existing_options:
            continue
        await option_service.create(
            OptionCreate(
                name=name,
                route=route,
                icon=icon,
                order=order,
                module_id=modules[module_name].id,
                role_ids=[roles[role_name].id for role_name in role_names],
            )
        )

    if await store.find_user_by_login(DEFAULT_ADMIN["username"]) is None:
        await user_service.create(
            UserCreate(
                username=DEFAULT_ADMIN["username"],
                email=DEFAULT_ADMIN["email"],
                password=admin_password or DEFAULT_ADMIN["password"],
                person=DEFAULT_ADMIN["person"],
                role_ids=[roles["Administrador"].id],
            )
        )

    log.info("Seeded default access configuration")
