"""Client-side object mapper for JSON:API documents."""

from __future__ import annotations

from importlib import metadata

from jsonapi_orm.adapters.jsonapi import (
    AttributeCastError,
    DocumentParser,
    JsonApiError,
    KeyCase,
    MalformedDocumentError,
    UnknownTypeError,
)
from jsonapi_orm.domain.include import IncludeDirective
from jsonapi_orm.domain.model import Attr, BelongsTo, Entity, HasMany, HasOne, TypeRegistry

try:
    __version__ = metadata.version("jsonapi-orm")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Attr",
    "AttributeCastError",
    "BelongsTo",
    "DocumentParser",
    "Entity",
    "HasMany",
    "HasOne",
    "IncludeDirective",
    "JsonApiError",
    "KeyCase",
    "MalformedDocumentError",
    "TypeRegistry",
    "UnknownTypeError",
    "__version__",
]
