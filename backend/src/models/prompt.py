"""Persisted prompt record shape and id-prefix classification."""
from typing import Any

# Stored records are plain JSON objects. Custom records may carry extra
# client-supplied keys, so they are kept as dicts rather than a fixed class.
PromptRecord = dict[str, Any]

VIP_ID_PREFIX = "vip-"
CUSTOM_ID_PREFIX = "custom-"

CUSTOM_CATEGORY = "Custom"
DEFAULT_ICON = "✨"

# Computed at aggregation time, never written to a record store. Both the wire
# (camelCase) and attribute (snake_case) spellings are reserved.
OVERLAY_FIELDS = frozenset({
    "isFavorite", "usageCount", "isVip",
    "is_favorite", "usage_count", "is_vip",
})


def is_vip_id(prompt_id: str) -> bool:
    """Return True if the id belongs to the premium collection."""
    return prompt_id.startswith(VIP_ID_PREFIX)


def is_custom_id(prompt_id: str) -> bool:
    """Return True if the id was generated for a user-created record."""
    return prompt_id.startswith(CUSTOM_ID_PREFIX)


def strip_overlay_fields(record: PromptRecord) -> PromptRecord:
    """Return a copy of the record without favorite/usage/VIP overlay keys."""
    return {key: value for key, value in record.items() if key not in OVERLAY_FIELDS}
