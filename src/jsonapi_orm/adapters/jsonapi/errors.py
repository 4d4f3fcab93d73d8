"""Errors raised while ingesting JSON:API documents."""

from __future__ import annotations


class JsonApiError(RuntimeError):
    """Base class for document ingestion failures."""


class UnknownTypeError(JsonApiError):
    """Raised when a resource names a type without a registered entity class.

    Recoverable per resource: relationship members of unknown types are dropped
    and the rest of the document is still ingested.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"No entity class registered for jsonapi type {type_name!r}")
        self.type_name = type_name


class MalformedDocumentError(JsonApiError):
    """Raised when a document is structurally invalid. Fatal for the parse call."""


class AttributeCastError(MalformedDocumentError):
    """Raised when an attribute value cannot be coerced to its declared type."""

    def __init__(self, message: str, *, attribute: str) -> None:
        super().__init__(message)
        self.attribute = attribute
