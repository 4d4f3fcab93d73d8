"""Minimal Pydantic models for JSON:API response documents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JsonApiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ResourceIdentifier(JsonApiBaseModel):
    type: str
    id: str | None = None
    meta: dict[str, Any] | None = None


class RelationshipObject(JsonApiBaseModel):
    data: ResourceIdentifier | list[ResourceIdentifier] | None = None
    meta: dict[str, Any] | None = None

    @property
    def has_data(self) -> bool:
        """Whether the ``data`` key was sent at all (``null`` counts as sent)."""
        return "data" in self.model_fields_set


class ResourceObject(JsonApiBaseModel):
    type: str
    id: str | None = None
    attributes: dict[str, Any] | None = None
    relationships: dict[str, RelationshipObject] | None = None
    meta: dict[str, Any] | None = None

    @property
    def identity(self) -> tuple[str, str] | None:
        if self.id is None:
            return None
        return (self.type, self.id)


class Document(JsonApiBaseModel):
    data: ResourceObject | list[ResourceObject] | None
    included: list[ResourceObject] = Field(default_factory=list["ResourceObject"])
    meta: dict[str, Any] | None = None
