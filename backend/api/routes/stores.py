"""
Store endpoints.

Reads are open to every signed-in user; writes are admin only.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from modules.auth.models import Profile
from modules.stores.interfaces import IStoreService
from modules.stores.models import Store, StoreCreate, StoreDirectory, StoreUpdate, Zone
from ..dependencies import get_current_profile, get_store_service
from ..models import ErrorResponse

router = APIRouter(responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}})


@router.get("", response_model=StoreDirectory)
async def list_stores(
    search: Optional[str] = Query(default=None, description="Match on name or address"),
    profile: Profile = Depends(get_current_profile),
    service: IStoreService = Depends(get_store_service),
) -> StoreDirectory:
    return await service.get_directory(profile, search)


@router.get("/zones", response_model=list[Zone])
async def list_zones(
    profile: Profile = Depends(get_current_profile),
    service: IStoreService = Depends(get_store_service),
) -> list[Zone]:
    return await service.list_zones()


@router.post("", response_model=Store, status_code=201)
async def create_store(
    request: StoreCreate,
    profile: Profile = Depends(get_current_profile),
    service: IStoreService = Depends(get_store_service),
) -> Store:
    return await service.create_store(profile, request)


@router.patch("/{store_id}", response_model=Store, responses={404: {"model": ErrorResponse}})
async def update_store(
    store_id: str,
    request: StoreUpdate,
    profile: Profile = Depends(get_current_profile),
    service: IStoreService = Depends(get_store_service),
) -> Store:
    return await service.update_store(profile, store_id, request)


@router.delete(
    "/{store_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_store(
    store_id: str,
    confirm: bool = Query(default=False, description="Must be true to delete"),
    profile: Profile = Depends(get_current_profile),
    service: IStoreService = Depends(get_store_service),
) -> None:
    """Delete a store. Requires ?confirm=true."""
    await service.delete_store(profile, store_id, confirm=confirm)
