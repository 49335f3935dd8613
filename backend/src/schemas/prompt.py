"""Pydantic schemas for prompt catalog endpoints."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from services.prompt_derivation import normalize_custom_tags


class PromptCreate(BaseModel):
    """
    Schema for creating a custom prompt.

    `act` and `prompt` are optional at the schema level so that a missing field
    is reported as a 400 by the service rather than a 422. Unknown keys are kept
    and persisted with the record.
    """

    model_config = ConfigDict(extra="allow")

    act: str | None = None
    prompt: str | None = None
    icon: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> list[str]:
        """Accept a list or a comma-separated string of tags."""
        return normalize_custom_tags(v)


class PromptUpdate(BaseModel):
    """Schema for a partial update of a custom prompt; only sent keys are merged."""

    model_config = ConfigDict(extra="allow")

    act: str | None = None
    prompt: str | None = None
    icon: str | None = None
    category: str | None = None
    tags: list[str] | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> list[str] | None:
        """Normalize tags if provided."""
        if v is None:
            return None
        return normalize_custom_tags(v)


class PromptResponse(BaseModel):
    """
    A prompt record with its metadata overlay applied.

    `is_favorite`, `usage_count` and `is_vip` are computed per request and are
    never part of the stored record. Extra keys of custom records pass through.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    act: str
    prompt: str
    icon: str
    category: str
    tags: list[str] = Field(default_factory=list)
    is_favorite: bool = False
    usage_count: int = 0
    is_vip: bool = False


class DeleteResponse(BaseModel):
    """Response for a successful delete."""

    success: bool = True
