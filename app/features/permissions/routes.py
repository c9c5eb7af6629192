"""
Permission tree preview routes.
"""
from typing import List
from fastapi import APIRouter, Depends, Query

from app.core.errors import ValidationError
from app.core.responses import SuccessResponse
from app.core.store.base import EntityStore
from app.core.store.dependencies import get_store
from app.features.permissions.assembler import PermissionAssembler
from app.features.permissions.schemas import RoleGrant


router = APIRouter(tags=["permissions"])


@router.get("/roles", response_model=SuccessResponse[List[RoleGrant]])
async def preview_permissions(
    role: List[str] = Query([], description="Role IDs, repeatable"),
    store: EntityStore = Depends(get_store),
):
    """
    Preview the permission tree a user holding the given roles would get at login.

    Unknown role IDs are rejected with 404.
    """
    if not role:
        raise ValidationError("At least one role is required")
    permisos = await PermissionAssembler(store).for_roles(role, strict=True)
    return SuccessResponse[List[RoleGrant]](data=permisos)
