"""JSON:API document adapter package."""

from __future__ import annotations

from .casing import KeyCase, key_formatter
from .errors import AttributeCastError, JsonApiError, MalformedDocumentError, UnknownTypeError
from .identity_map import EntityRegistry
from .merger import ResourceMerger
from .pruning import IncludeGraphFilter
from .relationships import ResourcePool, RelationshipResolver
from .schema import Document, RelationshipObject, ResourceIdentifier, ResourceObject
from .translator import DocumentParser

__all__ = [
    "AttributeCastError",
    "Document",
    "DocumentParser",
    "EntityRegistry",
    "IncludeGraphFilter",
    "ResourcePool",
    "JsonApiError",
    "KeyCase",
    "MalformedDocumentError",
    "RelationshipObject",
    "RelationshipResolver",
    "ResourceIdentifier",
    "ResourceMerger",
    "ResourceObject",
    "UnknownTypeError",
    "key_formatter",
]
