"""
Client-side projection of the catalog into the list actually shown.

Everything here is pure: the same catalog, overrides and options always give
the same result, and nothing performs I/O.
"""
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Literal

from catalog_client.overrides import LocalOverrides
from models.prompt import is_custom_id, is_vip_id

SortMode = Literal["newest", "usage", "alpha"]

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class PromptView:
    """A catalog prompt as held by the client."""

    id: str
    act: str
    prompt: str
    icon: str
    category: str
    tags: tuple[str, ...] = ()
    is_favorite: bool = False
    usage_count: int = 0
    is_vip: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PromptView":
        """Build from an API record. The server-sent `isVip` is ignored."""
        prompt_id = str(data["id"])
        return cls(
            id=prompt_id,
            act=data.get("act") or "",
            prompt=data.get("prompt") or "",
            icon=data.get("icon") or "",
            category=data.get("category") or "",
            tags=tuple(data.get("tags") or ()),
            is_favorite=bool(data.get("isFavorite", False)),
            usage_count=int(data.get("usageCount", 0)),
            is_vip=is_vip_id(prompt_id),
        )

    @property
    def is_custom(self) -> bool:
        """True for user-created prompts."""
        return is_custom_id(self.id)


@dataclass(frozen=True)
class ProjectionOptions:
    """Search, filter and sort settings chosen by the user."""

    query: str = ""
    category: str = ALL_CATEGORIES
    favorites_only: bool = False
    vip_only: bool = False
    sort_by: SortMode = "newest"


@dataclass(frozen=True)
class CatalogStats:
    """Profile summary of the local metadata."""

    favorites: int
    total_usage: int


def apply_overrides(prompt: PromptView, overrides: LocalOverrides) -> PromptView:
    """Replace favorite/usage with the local values and recompute VIP from the id."""
    return replace(
        prompt,
        is_favorite=overrides.is_favorite(prompt.id),
        usage_count=overrides.usage_for(prompt.id),
        is_vip=is_vip_id(prompt.id),
    )


def matches_query(prompt: PromptView, query: str) -> bool:
    """Case-insensitive substring match against act, prompt text or any tag."""
    needle = query.lower()
    return (
        needle in prompt.act.lower()
        or needle in prompt.prompt.lower()
        or any(needle in tag.lower() for tag in prompt.tags)
    )


def _sort_key(prompt: PromptView, sort_by: SortMode) -> tuple:
    if sort_by == "usage":
        # VIP status does not count when sorting by usage
        return (-prompt.usage_count,)
    vip_rank = 0 if prompt.is_vip else 1
    if sort_by == "alpha":
        # Case-insensitive, lowercase before uppercase on ties
        return (vip_rank, prompt.act.casefold(), prompt.act.swapcase())
    return (vip_rank, 0 if prompt.is_custom else 1)


def project_prompts(
    prompts: Iterable[PromptView],
    overrides: LocalOverrides,
    options: ProjectionOptions | None = None,
) -> list[PromptView]:
    """
    Produce the rendered sequence.

    Filters apply in order: search query, category (skipped for "All"),
    favorites only, VIP only. The sort is stable, so prompts that compare equal
    keep their catalog order:
      - newest (default): VIP first, then custom prompts, then the rest
      - alpha: VIP first, then by act
      - usage: by descending usage count, ignoring VIP status
    """
    options = options or ProjectionOptions()
    result = [apply_overrides(prompt, overrides) for prompt in prompts]

    if options.query:
        result = [p for p in result if matches_query(p, options.query)]
    if options.category != ALL_CATEGORIES:
        result = [p for p in result if p.category == options.category]
    if options.favorites_only:
        result = [p for p in result if p.is_favorite]
    if options.vip_only:
        result = [p for p in result if p.is_vip]

    return sorted(result, key=lambda p: _sort_key(p, options.sort_by))


def list_categories(prompts: Sequence[PromptView]) -> list[str]:
    """Category choices: the "All" sentinel followed by distinct categories, sorted."""
    return [ALL_CATEGORIES, *sorted({prompt.category for prompt in prompts})]


def catalog_stats(overrides: LocalOverrides) -> CatalogStats:
    """Count favorites and total recorded uses."""
    return CatalogStats(
        favorites=len(overrides.favorites),
        total_usage=sum(overrides.usage_counts.values()),
    )
