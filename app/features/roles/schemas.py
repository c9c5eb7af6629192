"""
Pydantic schemas for role requests and responses.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RoleWrite(BaseModel):
    """Fields accepted on create and update."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, alias="nombre", max_length=50)
    icon: Optional[str] = Field(None, alias="icono", max_length=100)
    description: Optional[str] = Field(None, alias="descripcion", max_length=1000)
    is_active: Optional[bool] = Field(None, alias="activo")


class RoleCreate(RoleWrite):
    """Schema for creating a role."""


class RoleUpdate(RoleWrite):
    """Schema for updating a role. Omitted fields are left untouched."""


class RoleResponse(BaseModel):
    """Schema for role responses."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="nombre")
    icon: str = Field(alias="icono")
    description: str = Field("", alias="descripcion")
    is_active: bool = Field(alias="activo")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class RoleStub(BaseModel):
    """A role reference that no longer resolves to a stored role."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
