"""Prompt catalog endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_catalog_stores
from db.stores import CatalogStores
from schemas.prompt import DeleteResponse, PromptCreate, PromptResponse, PromptUpdate
from services import catalog_service, prompt_service
from services.exceptions import (
    CuratedSourceError,
    MissingFieldsError,
    PromptNotFoundError,
    StoreWriteError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


@router.get("", response_model=list[PromptResponse])
async def list_prompts(
    stores: CatalogStores = Depends(get_catalog_stores),
) -> list[PromptResponse]:
    """
    Return the aggregated catalog: VIP, then custom, then curated prompts.

    Each prompt carries `isFavorite`, `usageCount` and `isVip` computed from the
    metadata store at request time.
    """
    try:
        return await catalog_service.get_catalog(stores)
    except CuratedSourceError:
        logger.exception("Failed to load curated prompts")
        raise HTTPException(status_code=500, detail="Failed to parse CSV prompts")


@router.post("", response_model=PromptResponse)
async def create_prompt(
    data: PromptCreate,
    stores: CatalogStores = Depends(get_catalog_stores),
) -> PromptResponse:
    """Create a custom prompt. The server assigns its id."""
    try:
        record = await prompt_service.create_prompt(stores, data)
    except MissingFieldsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreWriteError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return await catalog_service.present_record(stores, record)


@router.put("/{prompt_id}", response_model=PromptResponse)
async def update_prompt(
    prompt_id: str,
    data: PromptUpdate,
    stores: CatalogStores = Depends(get_catalog_stores),
) -> PromptResponse:
    """Partially update a custom prompt. Curated and VIP prompts cannot be edited."""
    try:
        record = await prompt_service.update_prompt(stores, prompt_id, data)
    except PromptNotFoundError:
        raise HTTPException(status_code=404, detail="Prompt not found")
    except StoreWriteError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return await catalog_service.present_record(stores, record)


@router.delete("/{prompt_id}", response_model=DeleteResponse)
async def delete_prompt(
    prompt_id: str,
    stores: CatalogStores = Depends(get_catalog_stores),
) -> DeleteResponse:
    """Delete a custom prompt."""
    try:
        await prompt_service.delete_prompt(stores, prompt_id)
    except PromptNotFoundError:
        raise HTTPException(status_code=404, detail="Prompt not found")
    except StoreWriteError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return DeleteResponse(success=True)
