"""Local favorite/usage override layer for optimistic client updates."""
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from shared.api_errors import ParsedApiError

if TYPE_CHECKING:
    from catalog_client.projection import PromptView

MutationKind = Literal["favorite", "usage"]


@dataclass
class LocalOverrides:
    """
    Client-held favorites and usage counts.

    Seeded from the fetched catalog and updated before the matching request
    resolves. They are merged onto the catalog at render time, so a failed
    request leaves the local value in place.
    """

    favorites: set[str] = field(default_factory=set)
    usage_counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_catalog(cls, prompts: Iterable["PromptView"]) -> "LocalOverrides":
        """Start from the server's view of favorites and usage."""
        favorites = set()
        usage_counts = {}
        for prompt in prompts:
            if prompt.is_favorite:
                favorites.add(prompt.id)
            if prompt.usage_count:
                usage_counts[prompt.id] = prompt.usage_count
        return cls(favorites=favorites, usage_counts=usage_counts)

    def is_favorite(self, prompt_id: str) -> bool:
        return prompt_id in self.favorites

    def usage_for(self, prompt_id: str) -> int:
        return self.usage_counts.get(prompt_id, 0)

    def toggle_favorite(self, prompt_id: str) -> bool:
        """Flip membership locally; returns the new state."""
        if prompt_id in self.favorites:
            self.favorites.discard(prompt_id)
            return False
        self.favorites.add(prompt_id)
        return True

    def increment_usage(self, prompt_id: str) -> int:
        """Add one use locally; returns the new count."""
        count = self.usage_for(prompt_id) + 1
        self.usage_counts[prompt_id] = count
        return count


@dataclass
class MutationOutcome:
    """Result of a favorite/usage request, handed to the reconciliation hook."""

    kind: MutationKind
    prompt_id: str
    payload: dict[str, Any] | None = None
    error: ParsedApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


Reconciler = Callable[[MutationOutcome, LocalOverrides], None]


def adopt_server_state(outcome: MutationOutcome, overrides: LocalOverrides) -> None:
    """
    Reconciler that replaces local values with what the server returned.

    Not installed by default. Failed requests are left alone, so the optimistic
    value stays in place either way.
    """
    if not outcome.ok or outcome.payload is None:
        return
    if outcome.kind == "favorite" and "favorites" in outcome.payload:
        overrides.favorites = set(outcome.payload["favorites"])
    elif outcome.kind == "usage" and "usageCount" in outcome.payload:
        overrides.usage_counts[outcome.prompt_id] = int(outcome.payload["usageCount"])
