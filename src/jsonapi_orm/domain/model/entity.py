"""Base entity: identity, declared values and lifecycle flags."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, ClassVar

from jsonapi_orm.common import pluralize, underscore
from jsonapi_orm.domain.changes import ChangeTracker, members_of

from .fields import ResourceSchema

if TYPE_CHECKING:
    from jsonapi_orm.domain.include import IncludeSpec

_tracker = ChangeTracker()


class Entity:
    """An instance of a typed JSON:API record.

    Subclasses declare their values with ``Attr`` and relationship descriptors and
    may set ``JSONAPI_TYPE``; otherwise the type name is derived from the class name.
    Any other attribute set on an instance belongs to the caller and is never
    touched by the mapper.
    """

    # class-level discriminator; derived from the class name unless overridden
    JSONAPI_TYPE: ClassVar[str]
    SCHEMA: ClassVar[ResourceSchema] = ResourceSchema(type_name="")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "JSONAPI_TYPE" not in vars(cls):
            cls.JSONAPI_TYPE = pluralize(underscore(cls.__name__))
        cls.SCHEMA = ResourceSchema.collect(cls, cls.JSONAPI_TYPE)

    def __init__(
        self,
        *,
        id: str | None = None,  # noqa: A002
        persisted: bool = False,
        **values: Any,
    ) -> None:
        self.id = id
        self.meta: dict[str, Any] | None = None
        self.is_marked_for_destruction = False
        self.is_marked_for_disassociation = False
        self._attributes: dict[str, Any] = {}
        self._relationships: dict[str, Any] = {}
        self._original_attributes: dict[str, Any] = {}
        self._original_relationships: dict[str, tuple[Entity, ...]] = {}
        self._persisted = False
        self.assign(values)
        if persisted:
            self.is_persisted = True

    @property
    def jsonapi_type(self) -> str:
        return self.JSONAPI_TYPE

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the current declared attribute values."""
        return dict(self._attributes)

    @property
    def relationships(self) -> dict[str, Any]:
        """Current relationship values keyed by declared name."""
        return {
            name: self._relationships.get(name, [] if relationship.to_many else None)
            for name, relationship in self.SCHEMA.relationships.items()
        }

    @property
    def is_persisted(self) -> bool:
        return self._persisted

    @is_persisted.setter
    def is_persisted(self, value: bool) -> None:
        self._persisted = value
        if value:
            self._settle()

    def assign(self, values: dict[str, Any]) -> None:
        """Set declared attributes and relationships; undeclared keys are dropped."""
        schema = self.SCHEMA
        for name, value in values.items():
            if name in schema.attributes or name in schema.relationships:
                setattr(self, name, value)

    def is_type(self, type_name: str) -> bool:
        return self.JSONAPI_TYPE == type_name

    def changes(self) -> dict[str, list[Any]]:
        return _tracker.changes(self)

    def is_dirty(self, include: IncludeSpec = None) -> bool:
        return _tracker.is_dirty(self, include)

    def _settle(self) -> None:
        self._original_attributes = copy.deepcopy(self._attributes)
        self._original_relationships = {
            name: members_of(self._relationships.get(name)) for name in self.SCHEMA.relationships
        }

    def __repr__(self) -> str:
        parts = [f"id={self.id!r}"]
        parts.extend(f"{name}={value!r}" for name, value in self._attributes.items())
        return f"{type(self).__name__}({', '.join(parts)})"
