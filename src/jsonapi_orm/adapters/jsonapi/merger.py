"""Merge one wire resource object into an entity instance."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from jsonapi_orm.domain.model._internal import write_attribute

from .errors import AttributeCastError, UnknownTypeError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from jsonapi_orm.domain.model import Attr, Entity

    from .schema import ResourceObject

log = getLogger(__name__)

type ConstructorResolver = Callable[[str], type[Entity] | None]


class ResourceMerger:
    """Writes id, declared attributes and meta of a resource onto an entity.

    Only mapper-owned state is written; anything else the caller attached to the
    instance survives repeated merges of the same identity.
    """

    def __init__(
        self,
        resolve_constructor: ConstructorResolver,
        *,
        to_attribute_key: Callable[[str], str],
        coerce_attributes: bool = True,
    ) -> None:
        self._resolve_constructor = resolve_constructor
        self._to_attribute_key = to_attribute_key
        self._coerce_attributes = coerce_attributes

    def resolve(self, type_name: str) -> type[Entity] | None:
        return self._resolve_constructor(type_name)

    def construct(self, type_name: str) -> Entity:
        entity_cls = self.resolve(type_name)
        if entity_cls is None:
            raise UnknownTypeError(type_name)
        return entity_cls()

    def cast_attributes(
        self, entity_cls: type[Entity], resource: ResourceObject
    ) -> dict[str, Any]:
        """Declared attribute values of ``resource``, cast for ``entity_cls``.

        Touches no entity, so a whole document can be checked before any merge.
        Raises ``AttributeCastError`` for values that do not fit the declared type.
        """
        declared = entity_cls.SCHEMA.attributes
        values: dict[str, Any] = {}
        for wire_key, raw in (resource.attributes or {}).items():
            name = self._to_attribute_key(wire_key)
            attr = declared.get(name)
            if attr is None:
                log.debug("Ignoring undeclared attribute %r on %s", wire_key, resource.type)
                continue
            values[name] = self._cast(attr, raw, resource)
        return values

    def merge(
        self,
        target: Entity | None,
        resource: ResourceObject,
        values: Mapping[str, Any] | None = None,
    ) -> Entity:
        """Write ``resource`` onto ``target`` (or a new instance) and return it.

        ``values`` are attribute values already produced by ``cast_attributes`` for
        the class of the merged entity; they are cast here when omitted.
        """
        entity = self.construct(resource.type) if target is None else target
        if values is None:
            values = self.cast_attributes(type(entity), resource)

        entity.id = resource.id
        for name, value in values.items():
            write_attribute(entity, name, value)

        if resource.meta is not None:
            entity.meta = dict(resource.meta)
        return entity

    def _cast(self, attr: Attr, raw: object, resource: ResourceObject) -> object:
        if not self._coerce_attributes:
            return raw
        try:
            return attr.cast(raw)
        except ValidationError as exc:
            raise AttributeCastError(
                f"Invalid value for {resource.type}.{attr.name}: {raw!r}",
                attribute=attr.name,
            ) from exc
