from __future__ import annotations

import pytest

from jsonapi_orm import IncludeDirective
from tests.support.models import Author, Book, Genre


def _persisted_graph() -> tuple[Author, Book, Genre]:
    genre = Genre(id="1", name="Poetry", persisted=True)
    book = Book(id="1", title="Ariel", genre=genre, persisted=True)
    author = Author(id="1", first_name="Sylvia", books=[book], persisted=True)
    return author, book, genre


def test_new_entity_without_values_is_clean() -> None:
    author = Author()

    assert author.changes() == {}
    assert author.is_dirty() is False


def test_new_entity_diffs_against_implicit_none() -> None:
    author = Author(first_name="Sylvia", nilly=None)

    assert author.changes() == {"first_name": [None, "Sylvia"]}
    assert author.is_dirty() is True


def test_persisted_entity_is_clean_until_modified() -> None:
    author = Author(id="1", first_name="Sylvia", persisted=True)
    assert author.is_dirty() is False

    author.first_name = "Ted"

    assert author.changes() == {"first_name": ["Sylvia", "Ted"]}
    assert author.is_dirty() is True


def test_reverting_a_value_clears_the_change() -> None:
    author = Author(id="1", first_name="Sylvia", persisted=True)

    author.first_name = "Ted"
    author.first_name = "Sylvia"

    assert author.is_dirty() is False


def test_in_place_mutation_is_detected() -> None:
    author = Author(id="1", nilly=["a"], persisted=True)

    author.nilly.append("b")

    assert author.changes() == {"nilly": [["a"], ["a", "b"]]}


def test_marking_persisted_takes_a_new_snapshot() -> None:
    author = Author(first_name="Sylvia")

    author.is_persisted = True

    assert author.is_dirty() is False


@pytest.mark.parametrize("mark", ["is_marked_for_destruction", "is_marked_for_disassociation"])
def test_lifecycle_marks_make_entity_dirty(mark: str) -> None:
    author = Author(id="1", persisted=True)

    setattr(author, mark, True)

    assert author.changes() == {}
    assert author.is_dirty() is True


def test_related_changes_are_ignored_without_include() -> None:
    author, book, _ = _persisted_graph()

    book.title = "Colossus"

    assert author.is_dirty() is False
    assert author.is_dirty("books") is True


@pytest.mark.parametrize(
    "include",
    [
        "books.genre",
        ["books.genre"],
        {"books": "genre"},
        {"books": ["genre"]},
        {"books": {"genre": {}}},
        IncludeDirective.from_spec({"books": {"genre": {}}}),
    ],
)
def test_nested_changes_follow_include_forms(include: object) -> None:
    author, _, genre = _persisted_graph()

    genre.name = "Prose"

    assert author.is_dirty("books") is False
    assert author.is_dirty(include) is True  # type: ignore[arg-type]


def test_unnamed_relationships_are_not_inspected() -> None:
    author, _, _ = _persisted_graph()
    genre = Genre(name="unsaved")

    author.genre = genre

    assert author.is_dirty("books") is False
    assert author.is_dirty("genre") is True


def test_added_persisted_member_is_a_change() -> None:
    author, _, _ = _persisted_graph()

    author.books.append(Book(id="2", title="Winter Trees", persisted=True))

    assert author.is_dirty() is False
    assert author.is_dirty("books") is True


def test_removed_member_is_a_change() -> None:
    author, _, _ = _persisted_graph()

    author.books.clear()

    assert author.is_dirty("books") is True


def test_swapped_to_one_is_a_change() -> None:
    _, book, _ = _persisted_graph()

    book.genre = Genre(id="2", name="Drama", persisted=True)

    assert book.is_dirty() is False
    assert book.is_dirty("genre") is True


def test_cleared_to_one_is_a_change() -> None:
    _, book, _ = _persisted_graph()

    book.genre = None

    assert book.is_dirty("genre") is True


@pytest.mark.parametrize("mark", ["is_marked_for_destruction", "is_marked_for_disassociation"])
def test_marked_member_makes_owner_dirty(mark: str) -> None:
    author, book, _ = _persisted_graph()

    setattr(book, mark, True)

    assert author.is_dirty() is False
    assert author.is_dirty("books") is True


def test_unpersisted_owner_with_members_is_dirty() -> None:
    author = Author(books=[Book(id="1", persisted=True)])

    assert author.is_dirty() is False
    assert author.is_dirty("books") is True


def test_cyclic_graph_terminates_with_finite_include() -> None:
    author, book, _ = _persisted_graph()
    book.author = author
    book.is_persisted = True

    assert author.is_dirty({"books": {"author": {"books": {}}}}) is False
