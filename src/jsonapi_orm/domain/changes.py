"""Change tracking over entity graphs.

An entity is compared with the snapshot taken when it was last settled
(constructed persisted, marked persisted, or ingested from a document).
Relationship traversal is opt-in: only relationship paths named in the include
directive are inspected, so dirtiness elsewhere in the graph never leaks into
the answer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsonapi_orm.domain.include import IncludeDirective

if TYPE_CHECKING:
    from jsonapi_orm.domain.include import IncludeSpec
    from jsonapi_orm.domain.model import Entity
    from jsonapi_orm.domain.model.fields import Relationship


def members_of(value: Any) -> tuple[Entity, ...]:
    """Relationship value as a tuple of members, for to-one and to-many alike."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


class ChangeTracker:
    """Answers "what changed" and "is this dirty" for entities and sub-graphs."""

    def changes(self, entity: Entity) -> dict[str, list[Any]]:
        """Map attribute name to ``[old, new]`` for every differing attribute.

        Unpersisted entities have an implicit all-``None`` origin, so only
        non-null values count as changes.
        """
        original = entity._original_attributes if entity.is_persisted else {}  # noqa: SLF001
        current = entity._attributes  # noqa: SLF001
        result: dict[str, list[Any]] = {}
        for name in entity.SCHEMA.attributes:
            old = original.get(name)
            new = current.get(name)
            if old != new:
                result[name] = [old, new]
        return result

    def is_dirty(self, entity: Entity, include: IncludeSpec = None) -> bool:
        return self._is_dirty(entity, IncludeDirective.from_spec(include))

    def _is_dirty(self, entity: Entity, directive: IncludeDirective) -> bool:
        if self._is_self_dirty(entity):
            return True
        for name, relationship in entity.SCHEMA.relationships.items():
            if name not in directive:
                continue
            if self._is_relationship_dirty(entity, relationship, directive.child(name)):
                return True
        return False

    def _is_self_dirty(self, entity: Entity) -> bool:
        return (
            entity.is_marked_for_destruction
            or entity.is_marked_for_disassociation
            or bool(self.changes(entity))
        )

    def _is_relationship_dirty(
        self,
        entity: Entity,
        relationship: Relationship,
        nested: IncludeDirective,
    ) -> bool:
        current = members_of(entity._relationships.get(relationship.name))  # noqa: SLF001
        if entity.is_persisted:
            original = entity._original_relationships.get(relationship.name, ())  # noqa: SLF001
        else:
            original = ()
        if len(current) != len(original) or any(
            member is not before for member, before in zip(current, original, strict=True)
        ):
            return True
        return any(self._is_dirty(member, nested) for member in current)
