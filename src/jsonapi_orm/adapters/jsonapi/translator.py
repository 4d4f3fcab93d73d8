"""Translate JSON:API documents into entity graphs."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from jsonapi_orm.domain.include import IncludeDirective
from jsonapi_orm.domain.model._internal import settle

from .casing import KeyCase, key_formatter
from .errors import MalformedDocumentError, UnknownTypeError
from .identity_map import EntityRegistry
from .merger import ConstructorResolver, ResourceMerger
from .pruning import IncludeGraphFilter
from .relationships import RelationshipResolver, ResourcePool
from .schema import Document

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from jsonapi_orm.config import OrmConfig
    from jsonapi_orm.domain.include import IncludeSpec
    from jsonapi_orm.domain.model import Entity, TypeRegistry

    from .schema import ResourceObject

log = getLogger(__name__)


class _IngestionPass:
    """State of one ``parse`` call: a fresh registry and the document's resource pool.

    Attribute values of every resource are cast up front, so a value that does
    not fit its declared type fails the call before any entity is touched.
    """

    def __init__(
        self,
        merger: ResourceMerger,
        primary: list[ResourceObject],
        included: list[ResourceObject],
        to_key: Callable[[str], str],
        *,
        target: Entity | None = None,
    ) -> None:
        self.registry = EntityRegistry()
        self._merger = merger
        self._values: dict[int, tuple[type[Entity], dict[str, Any]]] = {}
        for resource in primary:
            self._prepare(resource, None if target is None else type(target))
        for resource in included:
            self._prepare(resource, None)
        self._resolver = RelationshipResolver(
            self.registry,
            ResourcePool([*primary, *included]),
            self.ingest,
            to_relationship_key=to_key,
        )

    def _prepare(self, resource: ResourceObject, entity_cls: type[Entity] | None) -> None:
        entity_cls = entity_cls or self._merger.resolve(resource.type)
        if entity_cls is None:
            # unknown types fail or are dropped when ingested
            return
        # keyed by object id: resources live as long as the pass
        values = self._merger.cast_attributes(entity_cls, resource)
        self._values[id(resource)] = (entity_cls, values)

    def ingest(self, resource: ResourceObject, target: Entity | None) -> Entity:
        entity_cls, values = self._values.get(id(resource), (None, None))
        if target is not None and type(target) is not entity_cls:
            values = None
        entity = self._merger.merge(target, resource, values)
        # registered before its relationships so self references resolve to it
        self.registry.register(entity)
        self._resolver.resolve(entity, resource.relationships)
        return entity

    def settle(self) -> None:
        for entity in self.registry.entities:
            settle(entity)


class DocumentParser:
    """Builds or refreshes entity graphs from JSON:API response documents.

    ``resolve_constructor`` maps a wire ``type`` to an entity class (typically
    ``TypeRegistry.resolve``). Wire keys are converted with ``key_case`` before
    being matched against declared attributes and relationships.
    """

    def __init__(
        self,
        resolve_constructor: ConstructorResolver,
        *,
        key_case: KeyCase = KeyCase.UNDERSCORE,
        coerce_attributes: bool = True,
    ) -> None:
        self._to_key = key_formatter(key_case)
        self._merger = ResourceMerger(
            resolve_constructor,
            to_attribute_key=self._to_key,
            coerce_attributes=coerce_attributes,
        )
        self._filter = IncludeGraphFilter()

    @classmethod
    def from_config(cls, registry: TypeRegistry, config: OrmConfig) -> DocumentParser:
        return cls(
            registry.resolve,
            key_case=config.key_case,
            coerce_attributes=config.coerce_attributes,
        )

    def parse(
        self,
        document: Mapping[str, Any] | Document,
        *,
        target: Entity | None = None,
        include: IncludeSpec = None,
    ) -> Entity | list[Entity] | None:
        """Ingest ``document`` and return the primary entity (or entities).

        With ``target`` the primary resource is merged into that instance, which is
        returned. ``include`` names the relationship paths this response covers;
        members flagged for destruction or disassociation are removed only along
        those paths. Every entity ingested by the call is settled as persisted.

        Raises ``MalformedDocumentError`` for structurally invalid documents and for
        attribute values that cannot be cast; both are detected before any entity
        is modified. Raises ``UnknownTypeError`` when the primary resource type is
        not registered.
        """
        payload = self._validate(document)
        directive = IncludeDirective.from_spec(include)

        data = payload.data
        if data is None:
            return None

        if isinstance(data, list):
            if target is not None:
                raise ValueError("target cannot be combined with a collection document")
            ingestion = _IngestionPass(self._merger, data, payload.included, self._to_key)
            entities: list[Entity] = []
            for resource in data:
                # may already be ingested through another member's relationship
                known = ingestion.registry.lookup(resource.type, resource.id)
                try:
                    entity = ingestion.ingest(resource, known)
                except UnknownTypeError as exc:
                    log.warning(
                        "Skipping primary resource %s:%s: %s", resource.type, resource.id, exc
                    )
                    continue
                if not any(entity is seen for seen in entities):
                    entities.append(entity)
            for entity in entities:
                self._filter.prune(entity, directive)
            ingestion.settle()
            return entities

        ingestion = _IngestionPass(
            self._merger, [data], payload.included, self._to_key, target=target
        )
        entity = ingestion.ingest(data, target)
        self._filter.prune(entity, directive)
        ingestion.settle()
        if payload.meta is not None:
            entity.meta = dict(payload.meta)
        return entity

    @staticmethod
    def _validate(document: Mapping[str, Any] | Document) -> Document:
        if isinstance(document, Document):
            return document
        try:
            return Document.model_validate(document)
        except ValidationError as exc:
            raise MalformedDocumentError(f"Invalid JSON:API document: {exc}") from exc
