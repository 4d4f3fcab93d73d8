"""Public domain model surface."""

from __future__ import annotations

from jsonapi_orm.domain.model.entity import Entity
from jsonapi_orm.domain.model.enums import RelationshipKind
from jsonapi_orm.domain.model.fields import (
    Attr,
    BelongsTo,
    HasMany,
    HasOne,
    Relationship,
    ResourceSchema,
)
from jsonapi_orm.domain.model.registry import TypeRegistry

__all__ = [
    "Attr",
    "BelongsTo",
    "Entity",
    "HasMany",
    "HasOne",
    "Relationship",
    "RelationshipKind",
    "ResourceSchema",
    "TypeRegistry",
]
