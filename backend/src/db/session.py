"""Process-wide store registry and the FastAPI dependency that exposes it."""
from core.config import get_settings
from db.stores import CatalogStores


# Global store state using a container to avoid global statement
class _StoreState:
    """Container for the process-wide catalog stores."""

    stores: CatalogStores | None = None


_state = _StoreState()


def get_catalog_stores() -> CatalogStores:
    """
    Return the catalog stores, building them from settings on first use.

    The same instance is shared by all requests so that per-file write locks,
    when enabled, actually serialize writers.
    """
    if _state.stores is None:
        _state.stores = CatalogStores.from_settings(get_settings())
    return _state.stores
