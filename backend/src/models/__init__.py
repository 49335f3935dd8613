"""Persisted data shapes."""
from models.metadata import CatalogMetadata
from models.prompt import (
    CUSTOM_CATEGORY,
    CUSTOM_ID_PREFIX,
    DEFAULT_ICON,
    OVERLAY_FIELDS,
    VIP_ID_PREFIX,
    PromptRecord,
    is_custom_id,
    is_vip_id,
    strip_overlay_fields,
)

__all__ = [
    "CUSTOM_CATEGORY",
    "CUSTOM_ID_PREFIX",
    "CatalogMetadata",
    "DEFAULT_ICON",
    "OVERLAY_FIELDS",
    "PromptRecord",
    "VIP_ID_PREFIX",
    "is_custom_id",
    "is_vip_id",
    "strip_overlay_fields",
]
