"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import health, metadata, prompts
from core.config import get_settings
from db.session import get_catalog_stores

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    # Startup: create any missing data file so first requests see empty stores
    stores = get_catalog_stores()
    created = stores.ensure_data_files()
    if created:
        logger.info("Initialized %d missing data file(s)", len(created))

    yield


app_settings = get_settings()

app = FastAPI(
    title="Prompt Vault API",
    description="A catalog of reusable AI persona prompts with favorites and usage tracking.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(prompts.router)
app.include_router(metadata.router)
