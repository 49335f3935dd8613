"""Client session: fetched catalog plus optimistic favorite/usage updates."""
import logging
from typing import Any

import httpx

from catalog_client.api_client import api_delete, api_get, api_post, api_put
from catalog_client.overrides import (
    LocalOverrides,
    MutationKind,
    MutationOutcome,
    Reconciler,
)
from catalog_client.projection import (
    CatalogStats,
    ProjectionOptions,
    PromptView,
    catalog_stats,
    list_categories,
    project_prompts,
)
from shared.api_errors import parse_request_error

logger = logging.getLogger(__name__)

PROMPTS_PATH = "/api/prompts"
FAVORITES_PATH = "/api/favorites"
USAGE_PATH = "/api/usage"


class CatalogSession:
    """
    Holds the catalog fetched from the API and the local override layer.

    Request failures are logged and never retried. Optimistic favorite/usage
    changes are not rolled back on failure, so local and server state can
    diverge until the next `load()`. Pass a `reconciler` to react when each
    favorite/usage request resolves; the default does nothing.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        reconciler: Reconciler | None = None,
    ) -> None:
        self.client = client
        self.reconciler = reconciler
        self.prompts: list[PromptView] = []
        self.overrides = LocalOverrides()

    async def load(self) -> bool:
        """Fetch the catalog and reset local overrides to the server's values."""
        try:
            data = await api_get(self.client, PROMPTS_PATH)
        except httpx.HTTPError as e:
            error = parse_request_error(e)
            logger.error("Failed to load prompts: %s", error.message)
            return False
        self.prompts = [PromptView.from_api(item) for item in data]
        self.overrides = LocalOverrides.from_catalog(self.prompts)
        return True

    def visible(self, options: ProjectionOptions | None = None) -> list[PromptView]:
        """The prompts to render for the given search/filter/sort options."""
        return project_prompts(self.prompts, self.overrides, options)

    def categories(self) -> list[str]:
        return list_categories(self.prompts)

    def stats(self) -> CatalogStats:
        return catalog_stats(self.overrides)

    def get(self, prompt_id: str) -> PromptView | None:
        """Look up a loaded prompt by id."""
        return next((p for p in self.prompts if p.id == prompt_id), None)

    async def create_prompt(
        self,
        act: str,
        prompt: str,
        tags: str | list[str] = "",
        icon: str | None = None,
        **extra: Any,
    ) -> PromptView | None:
        """Create a custom prompt; on success it is placed first in the local catalog."""
        payload: dict[str, Any] = {"act": act, "prompt": prompt, "tags": tags, **extra}
        if icon:
            payload["icon"] = icon
        try:
            data = await api_post(self.client, PROMPTS_PATH, payload)
        except httpx.HTTPError as e:
            error = parse_request_error(e, "prompt")
            logger.error("Failed to save prompt: %s", error.message)
            return None
        created = PromptView.from_api(data)
        self.prompts.insert(0, created)
        return created

    async def update_prompt(self, prompt_id: str, **fields: Any) -> PromptView | None:
        """Send a partial update; on success the local record is replaced."""
        try:
            data = await api_put(self.client, f"{PROMPTS_PATH}/{prompt_id}", fields)
        except httpx.HTTPError as e:
            error = parse_request_error(e, "prompt", prompt_id)
            logger.error("Failed to save prompt: %s", error.message)
            return None
        updated = PromptView.from_api(data)
        self.prompts = [updated if p.id == updated.id else p for p in self.prompts]
        return updated

    async def delete_prompt(self, prompt_id: str) -> bool:
        """Delete a custom prompt; it is removed locally only if the server succeeded."""
        try:
            await api_delete(self.client, f"{PROMPTS_PATH}/{prompt_id}")
        except httpx.HTTPError as e:
            error = parse_request_error(e, "prompt", prompt_id)
            logger.error("Failed to delete prompt: %s", error.message)
            return False
        self.prompts = [p for p in self.prompts if p.id != prompt_id]
        return True

    async def toggle_favorite(self, prompt_id: str) -> bool:
        """Flip the favorite locally, then tell the server. Returns the local state."""
        is_favorite = self.overrides.toggle_favorite(prompt_id)
        await self._send_mutation("favorite", FAVORITES_PATH, prompt_id)
        return is_favorite

    async def copy_prompt(self, prompt_id: str) -> str | None:
        """
        Return the prompt text for copying and record one use.

        The local count is incremented before the request is sent.
        """
        prompt = self.get(prompt_id)
        if prompt is None:
            return None
        self.overrides.increment_usage(prompt_id)
        await self._send_mutation("usage", USAGE_PATH, prompt_id)
        return prompt.prompt

    async def _send_mutation(self, kind: MutationKind, path: str, prompt_id: str) -> None:
        outcome = MutationOutcome(kind=kind, prompt_id=prompt_id)
        try:
            outcome.payload = await api_post(self.client, path, {"id": prompt_id})
        except httpx.HTTPError as e:
            outcome.error = parse_request_error(e, "prompt", prompt_id)
            logger.error("Failed to update %s for %s: %s", kind, prompt_id, outcome.error.message)
        if self.reconciler is not None:
            self.reconciler(outcome, self.overrides)
