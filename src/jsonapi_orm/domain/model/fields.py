"""Declarations for entity attributes and relationships.

Fields are plain descriptors collected into a ``ResourceSchema`` when an
``Entity`` subclass is created. Values live in per-instance stores, so the
mapper never has to reflect over arbitrary instance attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import TypeAdapter

from .enums import RelationshipKind

if TYPE_CHECKING:
    from .entity import Entity


class Attr:
    """A declared attribute, optionally typed.

    ``type_`` is any annotation pydantic understands. Untyped attributes keep
    wire values as they are.
    """

    name: str

    def __init__(self, type_: Any = None) -> None:
        self.type_ = type_

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Entity | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._attributes.get(self.name)  # noqa: SLF001

    def __set__(self, instance: Entity, value: Any) -> None:
        instance._attributes[self.name] = value  # noqa: SLF001

    @cached_property
    def _adapter(self) -> TypeAdapter[Any]:
        return TypeAdapter(self.type_)

    def cast(self, value: Any) -> Any:
        """Coerce a raw wire value to the declared type. ``None`` is kept as is."""
        if value is None or self.type_ is None:
            return value
        return self._adapter.validate_python(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self, 'name', '?')!r})"


class Relationship:
    """Base descriptor for declared relationships."""

    kind: ClassVar[RelationshipKind]
    name: str

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @property
    def to_many(self) -> bool:
        return self.kind is RelationshipKind.TO_MANY

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self, 'name', '?')!r})"


class _ToOne(Relationship):
    kind = RelationshipKind.TO_ONE

    def __get__(self, instance: Entity | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._relationships.get(self.name)  # noqa: SLF001

    def __set__(self, instance: Entity, value: Entity | None) -> None:
        instance._relationships[self.name] = value  # noqa: SLF001


class HasMany(Relationship):
    kind = RelationshipKind.TO_MANY

    def __get__(self, instance: Entity | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        # to-many relationships are never absent, only empty
        return instance._relationships.setdefault(self.name, [])  # noqa: SLF001

    def __set__(self, instance: Entity, value: Any) -> None:
        instance._relationships[self.name] = [] if value is None else list(value)  # noqa: SLF001


class HasOne(_ToOne):
    pass


class BelongsTo(_ToOne):
    pass


@dataclass(frozen=True, slots=True)
class ResourceSchema:
    """Declared attribute and relationship sets of one entity class."""

    type_name: str
    attributes: dict[str, Attr] = field(default_factory=dict[str, Attr])
    relationships: dict[str, Relationship] = field(default_factory=dict[str, Relationship])

    @classmethod
    def collect(cls, owner: type, type_name: str) -> ResourceSchema:
        """Gather fields along the MRO, base classes first, so subclasses extend."""

        attributes: dict[str, Attr] = {}
        relationships: dict[str, Relationship] = {}
        for klass in reversed(owner.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Attr):
                    relationships.pop(name, None)
                    attributes[name] = value
                elif isinstance(value, Relationship):
                    attributes.pop(name, None)
                    relationships[name] = value
        return cls(type_name=type_name, attributes=attributes, relationships=relationships)
