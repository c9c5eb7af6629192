"""
Role CRUD routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.responses import SuccessResponse
from app.core.store.base import EntityStore
from app.core.store.dependencies import get_store
from app.features.roles.schemas import RoleCreate, RoleResponse, RoleUpdate
from app.features.roles.service import RoleService


router = APIRouter(tags=["roles"])


def get_role_service(store: EntityStore = Depends(get_store)) -> RoleService:
    return RoleService(store)


@router.get("", response_model=SuccessResponse[List[RoleResponse]])
async def list_roles(service: RoleService = Depends(get_role_service)):
    """List all roles (active and inactive) in insertion order."""
    roles = await service.list()
    return SuccessResponse[List[RoleResponse]](data=[RoleResponse.model_validate(r) for r in roles])


@router.post("", response_model=SuccessResponse[RoleResponse], status_code=status.HTTP_201_CREATED)
async def create_role(
    role_data: RoleCreate,
    service: RoleService = Depends(get_role_service),
):
    """Create a new role."""
    role = await service.create(role_data)
    return SuccessResponse[RoleResponse](data=RoleResponse.model_validate(role))


@router.get("/{role_id}", response_model=SuccessResponse[RoleResponse])
async def get_role(role_id: str, service: RoleService = Depends(get_role_service)):
    """Get a role by ID."""
    role = await service.get(role_id)
    return SuccessResponse[RoleResponse](data=RoleResponse.model_validate(role))


@router.put("/{role_id}", response_model=SuccessResponse[RoleResponse])
async def update_role(
    role_id: str,
    role_update: RoleUpdate,
    service: RoleService = Depends(get_role_service),
):
    """Update the fields present in the request body."""
    role = await service.update(role_id, role_update.model_dump(exclude_unset=True))
    return SuccessResponse[RoleResponse](data=RoleResponse.model_validate(role))


@router.delete("/{role_id}", response_model=SuccessResponse[None])
async def delete_role(role_id: str, service: RoleService = Depends(get_role_service)):
    """Delete a role. Options and users referencing it keep the dangling identifier."""
    await service.delete(role_id)
    return SuccessResponse[None](message="Role deleted successfully")
