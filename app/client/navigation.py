"""
Menu and route-guard helpers driven by the permission tree.

Nothing here is cached: every call re-derives visibility from the state it
is given.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Protocol


PUBLIC_ROUTES = frozenset({"/", "/login"})


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str
    route: str
    icon: Optional[str] = None
    order: int = 0


@dataclass(frozen=True)
class MenuSection:
    module_id: str
    label: str
    icon: Optional[str] = None
    items: tuple[MenuItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RoleMenu:
    role_id: str
    role_name: str
    icon: Optional[str] = None
    sections: tuple[MenuSection, ...] = field(default_factory=tuple)


class RouteDecision(Enum):
    ALLOW = "allow"
    LOGIN = "login"
    NOT_FOUND = "not_found"


class SessionView(Protocol):
    is_authenticated: bool
    permisos: Optional[list[dict[str, Any]]]


def normalize_route(path: str) -> str:
    """Drop query string, fragment and trailing slash ("/a/b/?x=1" -> "/a/b")."""
    path = path.split("?", 1)[0].split("#", 1)[0].strip() or "/"
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def build_menu(permisos: Optional[Iterable[dict[str, Any]]]) -> list[RoleMenu]:
    """
    Turn the permission tree into renderable menu sections, one block per role
    exactly as delivered by the server.
    """
    menus = []
    for grant in permisos or []:
        role = grant.get("rol") or {}
        sections = []
        for module_grant in grant.get("modulos") or []:
            module = module_grant.get("module") or {}
            items = tuple(
                MenuItem(
                    id=option.get("_id", ""),
                    label=option.get("nombre", ""),
                    route=option.get("ruta", ""),
                    icon=option.get("icono"),
                    order=option.get("orden", 0),
                )
                for option in module_grant.get("opciones") or []
            )
            sections.append(
                MenuSection(
                    module_id=module.get("_id", ""),
                    label=module.get("nombre", ""),
                    icon=module.get("icono"),
                    items=items,
                )
            )
        menus.append(
            RoleMenu(
                role_id=role.get("_id", ""),
                role_name=role.get("nombre", ""),
                icon=role.get("icono"),
                sections=tuple(sections),
            )
        )
    return menus


def allowed_routes(permisos: Optional[Iterable[dict[str, Any]]]) -> frozenset[str]:
    """Every route granted by any role in the tree, normalized."""
    routes = set()
    for menu in build_menu(permisos):
        for section in menu.sections:
            for item in section.items:
                if item.route:
                    routes.add(normalize_route(item.route))
    return frozenset(routes)


def guard_route(session: SessionView, path: str) -> RouteDecision:
    """
    Decide whether ``path`` may be rendered.

    Public routes are always allowed; otherwise an unauthenticated session
    is sent to login and an authenticated one may only open routes granted
    by its permission tree (exact match after normalization).
    """
    route = normalize_route(path)
    if route in PUBLIC_ROUTES:
        return RouteDecision.ALLOW
    if not session.is_authenticated:
        return RouteDecision.LOGIN
    if route in allowed_routes(session.permisos):
        return RouteDecision.ALLOW
    return RouteDecision.NOT_FOUND
