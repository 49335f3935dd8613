"""Service layer for favorite toggles and usage counters."""
import logging

from db.stores import CatalogStores

logger = logging.getLogger(__name__)


async def toggle_favorite(stores: CatalogStores, prompt_id: str) -> list[str]:
    """
    Flip the favorite membership of an id and return the full favorites list.

    The id is not checked against any record store. Newly favorited ids are
    appended, so the list keeps insertion order.
    """
    async with stores.metadata.transaction():
        metadata = await stores.metadata.load()
        if prompt_id in metadata.favorites:
            metadata.favorites = [item for item in metadata.favorites if item != prompt_id]
        else:
            metadata.favorites.append(prompt_id)
        await stores.metadata.save(metadata)
    logger.debug("Toggled favorite %s (%d favorites)", prompt_id, len(metadata.favorites))
    return metadata.favorites


async def increment_usage(stores: CatalogStores, prompt_id: str) -> int:
    """
    Add one to the usage count of an id and return the new count.

    Without serialized writes, two concurrent increments can both read the same
    starting count and both write count + 1.
    """
    async with stores.metadata.transaction():
        metadata = await stores.metadata.load()
        count = metadata.usage_for(prompt_id) + 1
        metadata.usage_counts[prompt_id] = count
        await stores.metadata.save(metadata)
    return count
