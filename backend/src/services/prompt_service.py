"""Service layer for custom prompt create/update/delete."""
import logging

from db.stores import CatalogStores
from models.prompt import (
    CUSTOM_CATEGORY,
    DEFAULT_ICON,
    PromptRecord,
    strip_overlay_fields,
)
from schemas.prompt import PromptCreate, PromptUpdate
from services.exceptions import MissingFieldsError, PromptNotFoundError
from services.prompt_derivation import generate_custom_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("act", "prompt")


def _find_index(records: list[PromptRecord], prompt_id: str) -> int | None:
    for index, record in enumerate(records):
        if record.get("id") == prompt_id:
            return index
    return None


async def create_prompt(stores: CatalogStores, data: PromptCreate) -> PromptRecord:
    """
    Create a custom prompt and prepend it to the custom store (newest first).

    The service assigns the id; any client-sent id or overlay field is dropped.

    Raises:
        MissingFieldsError: If `act` or `prompt` is missing or blank.
    """
    payload = strip_overlay_fields(data.model_dump())
    missing = [name for name in REQUIRED_FIELDS if not (payload.get(name) or "").strip()]
    if missing:
        raise MissingFieldsError(missing)

    payload.pop("id", None)
    async with stores.custom.transaction():
        records = await stores.custom.load()
        record: PromptRecord = {
            **payload,
            "id": generate_custom_id({r["id"] for r in records}),
            "icon": payload.get("icon") or DEFAULT_ICON,
            "category": CUSTOM_CATEGORY,
        }
        records.insert(0, record)
        await stores.custom.save(records)

    logger.info("Created custom prompt %s", record["id"])
    return record


async def update_prompt(
    stores: CatalogStores,
    prompt_id: str,
    data: PromptUpdate,
) -> PromptRecord:
    """
    Shallow-merge the sent fields into a custom prompt.

    Only keys present in the request are applied. The id and overlay fields
    cannot be changed. Extra keys are merged as sent.

    Raises:
        PromptNotFoundError: If the id is not in the custom store. Curated and
            VIP prompts are read-only and also report not found.
    """
    updates = strip_overlay_fields(data.model_dump(exclude_unset=True))
    updates.pop("id", None)
    # null on a declared field means "leave unchanged"
    for name in PromptUpdate.model_fields:
        if name in updates and updates[name] is None:
            del updates[name]
    async with stores.custom.transaction():
        records = await stores.custom.load()
        index = _find_index(records, prompt_id)
        if index is None:
            raise PromptNotFoundError(prompt_id)
        records[index] = {**records[index], **updates}
        await stores.custom.save(records)
    return records[index]


async def delete_prompt(stores: CatalogStores, prompt_id: str) -> None:
    """
    Remove a custom prompt. Its favorite/usage metadata is left in place.

    Raises:
        PromptNotFoundError: If the id is not in the custom store. The store
            file is not rewritten in that case.
    """
    async with stores.custom.transaction():
        records = await stores.custom.load()
        remaining = [record for record in records if record.get("id") != prompt_id]
        if len(remaining) == len(records):
            raise PromptNotFoundError(prompt_id)
        await stores.custom.save(remaining)
    logger.info("Deleted custom prompt %s", prompt_id)
