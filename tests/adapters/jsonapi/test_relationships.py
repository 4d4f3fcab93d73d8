from __future__ import annotations

from typing import TYPE_CHECKING

from jsonapi_orm.adapters.jsonapi import (
    EntityRegistry,
    ResourcePool,
    RelationshipObject,
    RelationshipResolver,
    ResourceMerger,
    ResourceObject,
)
from jsonapi_orm.common import underscore
from tests.support.models import Author, Book, Genre, registry

if TYPE_CHECKING:
    from jsonapi_orm.domain.model import Entity


def _resolver(*included: dict[str, object]) -> tuple[RelationshipResolver, EntityRegistry]:
    identity_map = EntityRegistry()
    merger = ResourceMerger(registry.resolve, to_attribute_key=underscore)
    resolver: RelationshipResolver

    def ingest(resource: ResourceObject, target: Entity | None) -> Entity:
        entity = merger.merge(target, resource)
        identity_map.register(entity)
        resolver.resolve(entity, resource.relationships)
        return entity

    pool = ResourcePool(ResourceObject.model_validate(item) for item in included)
    resolver = RelationshipResolver(identity_map, pool, ingest, to_relationship_key=underscore)
    return resolver, identity_map


def _relationships(**members: dict[str, object]) -> dict[str, RelationshipObject]:
    return {name: RelationshipObject.model_validate(member) for name, member in members.items()}


def test_resource_pool_keeps_first_duplicate() -> None:
    pool = ResourcePool(
        ResourceObject.model_validate(item)
        for item in (
            {"type": "books", "id": "1", "attributes": {"title": "first"}},
            {"type": "books", "id": "1", "attributes": {"title": "second"}},
            {"type": "books"},
        )
    )

    found = pool.find("books", "1")

    assert len(pool) == 1
    assert found is not None
    assert found.attributes == {"title": "first"}


def test_resolve_prefers_registered_instance() -> None:
    resolver, identity_map = _resolver({"type": "genres", "id": "1", "attributes": {"name": "x"}})
    genre = Genre(id="1", name="registered")
    identity_map.register(genre)
    book = Book(id="1")

    resolver.resolve(book, _relationships(genre={"data": {"type": "genres", "id": "1"}}))

    assert book.genre is genre
    assert genre.name == "registered"


def test_resolve_reuses_existing_member_as_merge_target() -> None:
    resolver, identity_map = _resolver(
        {"type": "books", "id": "2", "attributes": {"title": "refreshed"}}
    )
    existing = Book(id="2", title="stale")
    author = Author(id="1", books=[existing])

    resolver.resolve(author, _relationships(books={"data": [{"type": "books", "id": "2"}]}))

    assert author.books == [existing]
    assert existing.title == "refreshed"
    assert identity_map.lookup("books", "2") is existing


def test_resolve_keeps_wire_order() -> None:
    resolver, _ = _resolver(
        {"type": "books", "id": "2"},
        {"type": "books", "id": "1"},
        {"type": "books", "id": "3"},
    )
    author = Author(id="1")

    resolver.resolve(
        author,
        _relationships(
            books={
                "data": [
                    {"type": "books", "id": "3"},
                    {"type": "books", "id": "1"},
                    {"type": "books", "id": "2"},
                ]
            }
        ),
    )

    assert [book.id for book in author.books] == ["3", "1", "2"]


def test_resolve_tolerates_cardinality_mismatch() -> None:
    resolver, _ = _resolver({"type": "books", "id": "1"}, {"type": "genres", "id": "1"})
    author = Author(id="1")

    resolver.resolve(
        author,
        _relationships(
            books={"data": {"type": "books", "id": "1"}},
            genre={"data": [{"type": "genres", "id": "9"}, {"type": "genres", "id": "1"}]},
        ),
    )

    assert [book.id for book in author.books] == ["1"]
    assert isinstance(author.genre, Genre)
    assert author.genre.id == "1"


def test_resolve_null_data_empties_to_many() -> None:
    resolver, _ = _resolver()
    author = Author(id="1", books=[Book(id="1")])

    resolver.resolve(author, _relationships(books={"data": None}))

    assert author.books == []
