"""
Pydantic schemas for the permission tree.

Shape (one entry per role):
    {"rol": {...}, "modulos": [{"module": {...}, "opciones": [{...}, ...]}, ...]}
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class PermissionRole(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="nombre")
    icon: str = Field(alias="icono")
    description: str = Field("", alias="descripcion")


class PermissionModule(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="nombre")
    description: str = Field("", alias="descripcion")
    icon: str = Field(alias="icono")
    order: int = Field(alias="orden")


class PermissionOption(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="nombre")
    route: str = Field(alias="ruta")
    icon: str = Field(alias="icono")
    order: int = Field(alias="orden")


class ModuleGrant(BaseModel):
    """A module and the options of it a role may see."""
    model_config = ConfigDict(populate_by_name=True)

    module: PermissionModule
    options: List[PermissionOption] = Field(default_factory=list, alias="opciones")


class RoleGrant(BaseModel):
    """Everything one role may see, grouped by module."""
    model_config = ConfigDict(populate_by_name=True)

    role: PermissionRole = Field(alias="rol")
    modules: List[ModuleGrant] = Field(default_factory=list, alias="modulos")
