"""Shared helpers without domain knowledge."""

from __future__ import annotations

from .inflection import camelize, dasherize, pluralize, underscore

__all__ = ["camelize", "dasherize", "pluralize", "underscore"]
