"""Pydantic schemas for favorites and usage endpoints."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PromptIdRequest(BaseModel):
    """Request body naming a prompt by id. Any id is accepted, known or not."""

    id: str


class FavoritesResponse(BaseModel):
    """The full favorites list after a toggle."""

    favorites: list[str]


class UsageResponse(BaseModel):
    """The new usage count after an increment."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    usage_count: int
