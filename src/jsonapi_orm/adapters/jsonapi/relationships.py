"""Resolve relationship stubs of a resource to concrete entity instances."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from jsonapi_orm.domain.changes import members_of
from jsonapi_orm.domain.model._internal import read_relationship, write_relationship

from .errors import UnknownTypeError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from jsonapi_orm.domain.model import Entity

    from .identity_map import EntityRegistry, Identity
    from .schema import RelationshipObject, ResourceIdentifier, ResourceObject

log = getLogger(__name__)

type Ingest = Callable[[ResourceObject, Entity | None], Entity]


class ResourcePool:
    """Resources of one document addressable by identity.

    Holds the primary ``data`` members as well as ``included``, so members of a
    collection document can refer to each other in any order. The first resource
    seen for an identity wins.
    """

    def __init__(self, resources: Iterable[ResourceObject]) -> None:
        self._by_identity: dict[Identity, ResourceObject] = {}
        for resource in resources:
            identity = resource.identity
            if identity is None:
                log.debug("Ignoring %s resource without id", resource.type)
                continue
            if identity in self._by_identity:
                log.debug("Duplicate resource %s; keeping the first", identity)
                continue
            self._by_identity[identity] = resource

    def find(self, type_name: str, id_: str) -> ResourceObject | None:
        return self._by_identity.get((type_name, id_))

    def __len__(self) -> int:
        return len(self._by_identity)


class RelationshipResolver:
    """Turns resource identifiers into entities, recursing through the pool.

    Every entity for an identified resource is obtained through the registry or
    through ``ingest``, which registers it before its own relationships are
    resolved. Shared references therefore become shared instances and cyclic
    references terminate on the partially built instance.
    """

    def __init__(
        self,
        registry: EntityRegistry,
        pool: ResourcePool,
        ingest: Ingest,
        *,
        to_relationship_key: Callable[[str], str],
    ) -> None:
        self._registry = registry
        self._pool = pool
        self._ingest = ingest
        self._to_relationship_key = to_relationship_key

    def resolve(
        self,
        entity: Entity,
        relationships: Mapping[str, RelationshipObject] | None,
    ) -> None:
        declared = entity.SCHEMA.relationships
        for wire_name, member in (relationships or {}).items():
            name = self._to_relationship_key(wire_name)
            relationship = declared.get(name)
            if relationship is None:
                log.debug(
                    "Ignoring undeclared relationship %r on %s", wire_name, entity.JSONAPI_TYPE
                )
                continue
            if not member.has_data:
                # relationship not returned; keep whatever is loaded
                continue

            data = member.data
            identifiers = [] if data is None else data if isinstance(data, list) else [data]
            existing = members_of(read_relationship(entity, name))

            if relationship.to_many:
                resolved = [self._resolve_identifier(ident, existing) for ident in identifiers]
                write_relationship(entity, name, [item for item in resolved if item is not None])
                continue

            if len(identifiers) > 1:
                log.debug(
                    "To-one %s.%s received %d identifiers; using the first resolvable",
                    entity.JSONAPI_TYPE,
                    name,
                    len(identifiers),
                )
            value: Entity | None = None
            for ident in identifiers:
                value = self._resolve_identifier(ident, existing)
                if value is not None:
                    break
            write_relationship(entity, name, value)

    def _resolve_identifier(
        self,
        identifier: ResourceIdentifier,
        existing: tuple[Entity, ...],
    ) -> Entity | None:
        if identifier.id is None:
            log.debug("Skipping %s identifier without id", identifier.type)
            return None

        known = self._registry.lookup(identifier.type, identifier.id)
        if known is not None:
            return known

        resource = self._pool.find(identifier.type, identifier.id)
        if resource is None:
            log.debug("No resource in document for %s:%s", identifier.type, identifier.id)
            return None

        target = next(
            (
                candidate
                for candidate in existing
                if candidate.JSONAPI_TYPE == identifier.type
                and candidate.id is not None
                and str(candidate.id) == identifier.id
            ),
            None,
        )
        try:
            return self._ingest(resource, target)
        except UnknownTypeError as exc:
            log.warning("Dropping %s:%s: %s", identifier.type, identifier.id, exc)
            return None
