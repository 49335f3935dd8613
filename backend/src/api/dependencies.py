"""FastAPI dependencies for injection."""
from core.config import get_settings
from db.session import get_catalog_stores

__all__ = [
    "get_catalog_stores",
    "get_settings",
]
