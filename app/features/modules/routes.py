"""
Module CRUD routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.responses import SuccessResponse
from app.core.store.base import EntityStore
from app.core.store.dependencies import get_store
from app.features.modules.schemas import ModuleCreate, ModuleResponse, ModuleUpdate
from app.features.modules.service import ModuleService


router = APIRouter(tags=["modules"])


def get_module_service(store: EntityStore = Depends(get_store)) -> ModuleService:
    return ModuleService(store)


@router.get("", response_model=SuccessResponse[List[ModuleResponse]])
async def list_modules(service: ModuleService = Depends(get_module_service)):
    """List all modules (active and inactive) in insertion order."""
    modules = await service.list()
    return SuccessResponse[List[ModuleResponse]](data=[ModuleResponse.model_validate(m) for m in modules])


@router.post("", response_model=SuccessResponse[ModuleResponse], status_code=status.HTTP_201_CREATED)
async def create_module(
    module_data: ModuleCreate,
    service: ModuleService = Depends(get_module_service),
):
    """Create a new module."""
    module = await service.create(module_data)
    return SuccessResponse[ModuleResponse](data=ModuleResponse.model_validate(module))


@router.get("/{module_id}", response_model=SuccessResponse[ModuleResponse])
async def get_module(module_id: str, service: ModuleService = Depends(get_module_service)):
    """Get a module by ID."""
    module = await service.get(module_id)
    return SuccessResponse[ModuleResponse](data=ModuleResponse.model_validate(module))


@router.put("/{module_id}", response_model=SuccessResponse[ModuleResponse])
async def update_module(
    module_id: str,
    module_update: ModuleUpdate,
    service: ModuleService = Depends(get_module_service),
):
    """Update the fields present in the request body."""
    module = await service.update(module_id, module_update.model_dump(exclude_unset=True))
    return SuccessResponse[ModuleResponse](data=ModuleResponse.model_validate(module))


@router.delete("/{module_id}", response_model=SuccessResponse[None])
async def delete_module(module_id: str, service: ModuleService = Depends(get_module_service)):
    """Delete a module. Options pointing at it are left in place."""
    await service.delete(module_id)
    return SuccessResponse[None](message="Module deleted successfully")
