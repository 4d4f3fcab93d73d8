from __future__ import annotations

import pytest

from jsonapi_orm.adapters.jsonapi import EntityRegistry
from tests.support.models import Author, Book


def test_register_and_lookup_by_identity() -> None:
    registry = EntityRegistry()
    book = Book(id="1")

    registry.register(book)

    assert registry.lookup("books", "1") is book
    assert ("books", "1") in registry
    assert registry.lookup("authors", "1") is None


def test_entities_without_id_are_tracked_but_never_looked_up() -> None:
    registry = EntityRegistry()
    author = Author()

    registry.register(author)
    registry.register(author)

    assert registry.entities == (author,)
    assert registry.lookup("authors", None) is None


def test_registering_the_same_instance_twice_is_a_no_op() -> None:
    registry = EntityRegistry()
    book = Book(id="1")

    registry.register(book)
    registry.register(book)

    assert len(registry) == 1


def test_registering_a_second_instance_for_an_identity_fails() -> None:
    registry = EntityRegistry()
    registry.register(Book(id="1"))

    with pytest.raises(ValueError, match="already registered"):
        registry.register(Book(id="1"))


def test_lookup_uses_string_identity() -> None:
    registry = EntityRegistry()
    book = Book(id=7)  # type: ignore[arg-type]

    registry.register(book)

    assert registry.lookup("books", "7") is book
