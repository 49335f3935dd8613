"""Aggregation of the curated, VIP and custom stores into one catalog view."""
import logging

from pydantic import ValidationError

from db.stores import CatalogStores
from models.metadata import CatalogMetadata
from models.prompt import PromptRecord, is_vip_id, strip_overlay_fields
from schemas.prompt import PromptResponse
from services.prompt_derivation import (
    UNTITLED_ACT,
    category_for_act,
    derive_curated_records,
    icon_for_act,
    normalize_custom_tags,
)

logger = logging.getLogger(__name__)


def overlay_metadata(
    record: PromptRecord,
    metadata: CatalogMetadata,
    favorites: set[str],
) -> PromptResponse:
    """
    Join a stored record with its favorite/usage metadata.

    Any overlay keys found in the stored record are ignored; `is_vip` is
    derived from the id prefix. Display fields missing from hand-edited store
    files are filled with the same defaults curated rows get, and tags stored
    as a comma-separated string are split.

    Raises:
        ValidationError: If a display field holds a value of the wrong type.
    """
    data = strip_overlay_fields(record)
    act = data.get("act") or UNTITLED_ACT
    data["act"] = act
    data.setdefault("prompt", "")
    # Derive from a text act only; a malformed act fails validation below
    name = act if isinstance(act, str) else ""
    data.setdefault("icon", icon_for_act(name))
    data.setdefault("category", category_for_act(name))
    tags = data.get("tags")
    data["tags"] = normalize_custom_tags(tags) if isinstance(tags, str) else (tags or [])
    prompt_id = data["id"]
    return PromptResponse.model_validate({
        **data,
        "isFavorite": prompt_id in favorites,
        "usageCount": metadata.usage_for(prompt_id),
        "isVip": is_vip_id(prompt_id),
    })


async def present_record(stores: CatalogStores, record: PromptRecord) -> PromptResponse:
    """Overlay current metadata onto a single record, e.g. after a mutation."""
    metadata = await stores.metadata.load()
    return overlay_metadata(record, metadata, metadata.favorite_set())


async def get_catalog(stores: CatalogStores) -> list[PromptResponse]:
    """
    Build the full catalog: VIP records, then custom records, then curated records.

    The order is a presentation convention, not a ranking. Stores are re-read on
    every call.

    Raises:
        CuratedSourceError: If the curated CSV is missing, unreadable or lacks
            the `act`/`prompt` columns. Missing or malformed JSON stores read as
            empty instead.
    """
    metadata = await stores.metadata.load()
    favorites = metadata.favorite_set()

    vip_records = await stores.vip.load()
    custom_records = await stores.custom.load()
    curated_records = derive_curated_records(await stores.curated.read_rows())

    catalog = []
    for record in (*vip_records, *custom_records, *curated_records):
        try:
            catalog.append(overlay_metadata(record, metadata, favorites))
        except ValidationError as e:
            logger.warning(
                "Skipping prompt %s with invalid fields: %s",
                record["id"], e.errors(include_url=False),
            )
    logger.debug(
        "Aggregated %d prompts (vip=%d, custom=%d, curated=%d)",
        len(catalog), len(vip_records), len(custom_records), len(curated_records),
    )
    return catalog
