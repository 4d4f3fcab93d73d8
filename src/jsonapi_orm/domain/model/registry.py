"""Mapping from JSON:API type names to entity classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .entity import Entity


class TypeRegistry:
    """Resolves wire ``type`` strings to the classes that construct them."""

    def __init__(self) -> None:
        self._types: dict[str, type[Entity]] = {}

    def register[TEntity: Entity](self, entity_cls: type[TEntity]) -> type[TEntity]:
        """Register ``entity_cls`` under its ``JSONAPI_TYPE``. Usable as a decorator."""
        type_name = entity_cls.JSONAPI_TYPE
        existing = self._types.get(type_name)
        if existing is not None and existing is not entity_cls:
            raise ValueError(
                f"jsonapi type {type_name!r} already registered to {existing.__name__}"
            )
        self._types[type_name] = entity_cls
        return entity_cls

    def resolve(self, type_name: str) -> type[Entity] | None:
        return self._types.get(type_name)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
