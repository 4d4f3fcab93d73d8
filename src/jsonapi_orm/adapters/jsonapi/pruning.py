"""Drop members flagged for destruction or disassociation along included paths."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from jsonapi_orm.domain.model._internal import read_relationship, write_relationship

if TYPE_CHECKING:
    from jsonapi_orm.domain.include import IncludeDirective
    from jsonapi_orm.domain.model import Entity

log = getLogger(__name__)


def _is_marked(entity: Entity) -> bool:
    return entity.is_marked_for_destruction or entity.is_marked_for_disassociation


class IncludeGraphFilter:
    """Applies pending removals, but only on relationship paths a call included.

    A flagged to-many member is removed from its list and a flagged to-one member
    is replaced with ``None``. Removed members are not descended into, so when
    both a parent and its nested target are flagged the parent removal wins and
    the nested link is left as it was.
    """

    def prune(self, entity: Entity, directive: IncludeDirective) -> None:
        declared = entity.SCHEMA.relationships
        for name in directive:
            relationship = declared.get(name)
            if relationship is None:
                continue
            value = read_relationship(entity, name)
            if value is None:
                continue
            nested = directive.child(name)

            if not relationship.to_many:
                if _is_marked(value):
                    log.debug("Unlinking %s.%s from %r", entity.JSONAPI_TYPE, name, value)
                    write_relationship(entity, name, None)
                else:
                    self.prune(value, nested)
                continue

            kept: list[Entity] = []
            for member in value:
                if _is_marked(member):
                    log.debug("Removing %r from %s.%s", member, entity.JSONAPI_TYPE, name)
                    continue
                self.prune(member, nested)
                kept.append(member)
            if len(kept) != len(value):
                value[:] = kept
