"""
Pydantic schemas for option requests and responses.
"""
from datetime import datetime
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from app.features.modules.schemas import ModuleResponse
from app.features.roles.schemas import RoleResponse, RoleStub


class OptionWrite(BaseModel):
    """Fields accepted on create and update."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, alias="nombre", max_length=100)
    route: Optional[str] = Field(None, alias="ruta", max_length=255)
    icon: Optional[str] = Field(None, alias="icono", max_length=100)
    order: Optional[int] = Field(None, alias="orden")
    module_id: Optional[str] = Field(None, alias="module", description="Owning module ID")
    role_ids: Optional[List[str]] = Field(None, alias="roles", description="Role IDs allowed to see this option")
    is_active: Optional[bool] = Field(None, alias="activo")


class OptionCreate(OptionWrite):
    """Schema for creating an option."""


class OptionUpdate(OptionWrite):
    """Schema for updating an option. Omitted fields are left untouched."""


class OptionResponse(BaseModel):
    """
    Option with its module and roles populated.

    A module that no longer exists is rendered as null, a role that no
    longer exists as a bare {"_id": ...} stub.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str = Field(alias="nombre")
    route: str = Field(alias="ruta")
    icon: str = Field(alias="icono")
    order: int = Field(alias="orden")
    module: Optional[ModuleResponse] = None
    roles: List[Union[RoleResponse, RoleStub]] = []
    is_active: bool = Field(alias="activo")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
