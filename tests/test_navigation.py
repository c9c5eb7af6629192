"""Menu building and route guarding from a permission tree."""
from dataclasses import dataclass
from typing import Any, Optional

import pytest

from app.client.navigation import (
    RouteDecision,
    allowed_routes,
    build_menu,
    guard_route,
    normalize_route,
)


def option(oid, route, order=1):
    return {"_id": oid, "nombre": oid.upper(), "ruta": route, "icono": "fas fa-circle", "orden": order}


PERMISOS = [
    {
        "rol": {"_id": "r1", "nombre": "Administrador", "icono": "fas fa-user-shield"},
        "modulos": [
            {"module": {"_id": "m1", "nombre": "Dashboard", "icono": "fas fa-home"}, "opciones": [option("o1", "/dashboard")]},
        ],
    },
    {
        "rol": {"_id": "r2", "nombre": "Tesorero", "icono": "fas fa-wallet"},
        "modulos": [
            {"module": {"_id": "m1", "nombre": "Dashboard", "icono": "fas fa-home"}, "opciones": [option("o1", "/dashboard")]},
            {
                "module": {"_id": "m2", "nombre": "Solicitudes", "icono": "fas fa-file"},
                "opciones": [option("o2", "/solicitudes/crear"), option("o3", "/solicitudes", 2)],
            },
        ],
    },
]


@dataclass
class Session:
    is_authenticated: bool
    permisos: Optional[list[dict[str, Any]]] = None


def test_menu_keeps_one_block_per_role():
    menus = build_menu(PERMISOS)

    assert [m.role_name for m in menus] == ["Administrador", "Tesorero"]
    assert [s.label for s in menus[1].sections] == ["Dashboard", "Solicitudes"]
    assert [i.route for i in menus[1].sections[1].items] == ["/solicitudes/crear", "/solicitudes"]
    assert menus[0].sections[0].items[0].label == "O1"


def test_menu_of_nothing():
    assert build_menu(None) == []
    assert build_menu([{"rol": {"_id": "r3", "nombre": "Pastor"}, "modulos": []}])[0].sections == ()


def test_allowed_routes_union():
    assert allowed_routes(PERMISOS) == {"/dashboard", "/solicitudes/crear", "/solicitudes"}


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/dashboard", "/dashboard"),
        ("/dashboard/", "/dashboard"),
        ("/solicitudes?page=2", "/solicitudes"),
        ("/solicitudes#top", "/solicitudes"),
        ("dashboard", "/dashboard"),
        ("", "/"),
        ("/", "/"),
    ],
)
def test_normalize_route(path, expected):
    assert normalize_route(path) == expected


@pytest.mark.parametrize(
    "session, path, decision",
    [
        (Session(False), "/", RouteDecision.ALLOW),
        (Session(False), "/login", RouteDecision.ALLOW),
        (Session(False), "/dashboard", RouteDecision.LOGIN),
        (Session(True, PERMISOS), "/dashboard/", RouteDecision.ALLOW),
        (Session(True, PERMISOS), "/solicitudes?estado=nuevo", RouteDecision.ALLOW),
        (Session(True, PERMISOS), "/solicitudes/crear/extra", RouteDecision.NOT_FOUND),
        (Session(True, PERMISOS), "/configuracion", RouteDecision.NOT_FOUND),
        (Session(True, None), "/dashboard", RouteDecision.NOT_FOUND),
    ],
)
def test_guard_route(session, path, decision):
    assert guard_route(session, path) is decision
