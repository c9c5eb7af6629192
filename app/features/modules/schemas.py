"""
Pydantic schemas for module requests and responses.

Wire names follow the admin panel's API (nombre, descripcion, orden, ...).
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ModuleWrite(BaseModel):
    """
    Fields accepted on create and update.

    Every field is optional at the schema level: required-field checks and
    partial-update semantics live in ModuleService.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, alias="nombre", max_length=100)
    description: Optional[str] = Field(None, alias="descripcion", max_length=1000)
    icon: Optional[str] = Field(None, alias="icono", max_length=100)
    order: Optional[int] = Field(None, alias="orden")
    is_active: Optional[bool] = Field(None, alias="activo")


class ModuleCreate(ModuleWrite):
    """Schema for creating a module."""


class ModuleUpdate(ModuleWrite):
    """Schema for updating a module. Omitted fields are left untouched."""


class ModuleResponse(BaseModel):
    """Schema for module responses."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="nombre")
    description: str = Field("", alias="descripcion")
    icon: str = Field(alias="icono")
    order: int = Field(alias="orden")
    is_active: bool = Field(alias="activo")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
