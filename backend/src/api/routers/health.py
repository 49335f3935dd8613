"""Health check endpoints."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_catalog_stores
from db.stores import CatalogStores
from services.exceptions import CuratedSourceError


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    curated_source: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    stores: CatalogStores = Depends(get_catalog_stores),
) -> HealthResponse:
    """Check application health and whether the curated source is readable."""
    source_status = "healthy"
    try:
        await stores.curated.read_rows()
    except CuratedSourceError as e:
        logger.warning("Curated source health check failed: %s", e)
        source_status = "unhealthy"

    return HealthResponse(
        status="healthy" if source_status == "healthy" else "degraded",
        curated_source=source_status,
    )
