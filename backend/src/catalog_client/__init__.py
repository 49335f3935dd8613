"""Client library for browsing and editing the Prompt Vault catalog."""
from catalog_client.overrides import LocalOverrides, MutationOutcome, adopt_server_state
from catalog_client.projection import (
    ALL_CATEGORIES,
    CatalogStats,
    ProjectionOptions,
    PromptView,
    catalog_stats,
    list_categories,
    project_prompts,
)
from catalog_client.session import CatalogSession

__all__ = [
    "ALL_CATEGORIES",
    "CatalogSession",
    "CatalogStats",
    "LocalOverrides",
    "MutationOutcome",
    "ProjectionOptions",
    "PromptView",
    "adopt_server_state",
    "catalog_stats",
    "list_categories",
    "project_prompts",
]
