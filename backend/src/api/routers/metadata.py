"""Favorite and usage endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_catalog_stores
from db.stores import CatalogStores
from schemas.metadata import FavoritesResponse, PromptIdRequest, UsageResponse
from services import metadata_service
from services.exceptions import StoreWriteError

router = APIRouter(prefix="/api", tags=["metadata"])


@router.post("/favorites", response_model=FavoritesResponse)
async def toggle_favorite(
    data: PromptIdRequest,
    stores: CatalogStores = Depends(get_catalog_stores),
) -> FavoritesResponse:
    """Toggle whether a prompt is a favorite; returns the full favorites list."""
    try:
        favorites = await metadata_service.toggle_favorite(stores, data.id)
    except StoreWriteError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return FavoritesResponse(favorites=favorites)


@router.post("/usage", response_model=UsageResponse)
async def increment_usage(
    data: PromptIdRequest,
    stores: CatalogStores = Depends(get_catalog_stores),
) -> UsageResponse:
    """Record one use of a prompt; returns the new count."""
    try:
        count = await metadata_service.increment_usage(stores, data.id)
    except StoreWriteError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return UsageResponse(usage_count=count)
