"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class RelationshipKind(StrEnum):
    """Cardinality of a declared relationship."""

    TO_ONE = "to_one"
    TO_MANY = "to_many"
