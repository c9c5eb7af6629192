"""
Pydantic schemas for user-related requests and responses.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.features.roles.schemas import RoleResponse


class UserCreate(BaseModel):
    """Schema for creating a local user."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    person: Optional[Dict[str, Any]] = None
    role_ids: List[str] = Field(default_factory=list, alias="roles")
    is_active: bool = Field(True, alias="activo")


class UserProfile(BaseModel):
    """
    User profile returned at login. Never carries the password hash.

    Roles are populated as full role records; identifiers that no longer
    resolve are left out.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    email: str
    person: Optional[Dict[str, Any]] = None
    roles: List[RoleResponse] = []
    failed_login_attempts: int = Field(0, alias="intentosFallidos")
    is_active: bool = Field(alias="activo")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    last_access_at: Optional[datetime] = Field(None, alias="ultimoAcceso")
