"""Per-parse identity map of ingested entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonapi_orm.domain.model import Entity

type Identity = tuple[str, str]


@dataclass(slots=True)
class EntityRegistry:
    """Canonical instance per ``(type, id)`` within a single ingestion pass.

    A fresh registry is created for every top-level parse call; it is never
    shared between calls. Entities without an id are tracked for settling but
    are never addressable by identity.
    """

    _by_identity: dict[Identity, Entity] = field(
        default_factory=dict["Identity", "Entity"], repr=False
    )
    _entities: list[Entity] = field(default_factory=list["Entity"], repr=False)

    @property
    def entities(self) -> tuple[Entity, ...]:
        """Every registered entity, in registration order."""
        return tuple(self._entities)

    def register(self, entity: Entity) -> None:
        if entity.id is None:
            if not any(known is entity for known in self._entities):
                self._entities.append(entity)
            return
        key = (entity.JSONAPI_TYPE, str(entity.id))
        existing = self._by_identity.get(key)
        if existing is entity:
            return
        if existing is not None:
            raise ValueError(f"identity {key} is already registered to another instance")
        self._by_identity[key] = entity
        self._entities.append(entity)

    def lookup(self, type_name: str, id_: str | None) -> Entity | None:
        if id_ is None:
            return None
        return self._by_identity.get((type_name, id_))

    def __contains__(self, identity: object) -> bool:
        return identity in self._by_identity

    def __len__(self) -> int:
        return len(self._entities)
