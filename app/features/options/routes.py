"""
Option CRUD routes. Responses populate `module` and `roles`.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.responses import SuccessResponse
from app.core.store.base import EntityStore
from app.core.store.dependencies import get_store
from app.features.options.schemas import OptionCreate, OptionResponse, OptionUpdate
from app.features.options.service import OptionService


router = APIRouter(tags=["options"])


def get_option_service(store: EntityStore = Depends(get_store)) -> OptionService:
    return OptionService(store)


@router.get("", response_model=SuccessResponse[List[OptionResponse]])
async def list_options(service: OptionService = Depends(get_option_service)):
    """List all options with their module and roles."""
    return SuccessResponse[List[OptionResponse]](data=await service.list_populated())


@router.post("", response_model=SuccessResponse[OptionResponse], status_code=status.HTTP_201_CREATED)
async def create_option(
    option_data: OptionCreate,
    service: OptionService = Depends(get_option_service),
):
    """Create an option under an existing module, visible to existing roles."""
    option = await service.create(option_data)
    return SuccessResponse[OptionResponse](data=await service.populate(option))


@router.get("/{option_id}", response_model=SuccessResponse[OptionResponse])
async def get_option(option_id: str, service: OptionService = Depends(get_option_service)):
    """Get an option by ID."""
    option = await service.get(option_id)
    return SuccessResponse[OptionResponse](data=await service.populate(option))


@router.put("/{option_id}", response_model=SuccessResponse[OptionResponse])
async def update_option(
    option_id: str,
    option_update: OptionUpdate,
    service: OptionService = Depends(get_option_service),
):
    """Update the fields present in the request body."""
    option = await service.update(option_id, option_update.model_dump(exclude_unset=True))
    return SuccessResponse[OptionResponse](data=await service.populate(option))


@router.delete("/{option_id}", response_model=SuccessResponse[None])
async def delete_option(option_id: str, service: OptionService = Depends(get_option_service)):
    """Delete an option."""
    await service.delete(option_id)
    return SuccessResponse[None](message="Option deleted successfully")
