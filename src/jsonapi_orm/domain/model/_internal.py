"""Private helpers for mutating internal entity state.

Only domain model code and the document translator should import this module.
"""

# ruff: noqa: SLF001

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .entity import Entity


def write_attribute(entity: Entity, name: str, value: Any) -> None:
    entity._attributes[name] = value


def read_relationship(entity: Entity, name: str) -> Any:
    """Stored relationship value, without materialising an empty to-many list."""
    return entity._relationships.get(name)


def write_relationship(entity: Entity, name: str, value: Any) -> None:
    entity._relationships[name] = value


def settle(entity: Entity) -> None:
    """Mark ``entity`` persisted and snapshot its current state."""
    entity.is_persisted = True
