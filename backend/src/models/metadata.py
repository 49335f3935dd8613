"""Favorites and usage-count metadata document."""
import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class CatalogMetadata:
    """
    Per-user preference and telemetry data, joined to prompt records by id.

    Ids here need not exist in any record store. Metadata for deleted custom
    prompts is left in place.
    """

    favorites: list[str] = field(default_factory=list)
    usage_counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "CatalogMetadata":
        """
        Build from the persisted JSON document, tolerating missing or malformed parts.

        A non-list `favorites` or non-object `usageCounts` reads as empty. Favorite
        entries that are not strings and usage counts that are not non-negative
        integers are dropped, so their ids read as not favorited / zero uses.
        """
        if not isinstance(data, dict):
            return cls()

        favorites = data.get("favorites") or []
        if not isinstance(favorites, list):
            logger.warning("Ignoring favorites of type %s", type(favorites).__name__)
            favorites = []

        raw_counts = data.get("usageCounts") or {}
        if not isinstance(raw_counts, dict):
            logger.warning("Ignoring usageCounts of type %s", type(raw_counts).__name__)
            raw_counts = {}

        usage_counts = {}
        for prompt_id, value in raw_counts.items():
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                logger.warning("Ignoring usage count %r for %s", value, prompt_id)
                continue
            usage_counts[prompt_id] = value

        return cls(
            favorites=[item for item in favorites if isinstance(item, str)],
            usage_counts=usage_counts,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON document shape."""
        return {"favorites": list(self.favorites), "usageCounts": dict(self.usage_counts)}

    def favorite_set(self) -> set[str]:
        """Favorites as a set for membership checks."""
        return set(self.favorites)

    def usage_for(self, prompt_id: str) -> int:
        """Usage count for an id, zero when absent."""
        return self.usage_counts.get(prompt_id, 0)
