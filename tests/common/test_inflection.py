from __future__ import annotations

import pytest

from jsonapi_orm import KeyCase
from jsonapi_orm.adapters.jsonapi import key_formatter
from jsonapi_orm.common import camelize, dasherize, pluralize, underscore


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("firstName", "first_name"),
        ("first-name", "first_name"),
        ("FirstName", "first_name"),
        ("HTMLParser", "html_parser"),
        ("multi words", "multi_words"),
        ("already_snake", "already_snake"),
        ("page2Count", "page2_count"),
    ],
)
def test_underscore(word: str, expected: str) -> None:
    assert underscore(word) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("first_name", "firstName"),
        ("special-books", "specialBooks"),
        ("title", "title"),
    ],
)
def test_camelize(word: str, expected: str) -> None:
    assert camelize(word) == expected


def test_dasherize() -> None:
    assert dasherize("firstName") == "first-name"
    assert dasherize("special_books") == "special-books"


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("book", "books"),
        ("category", "categories"),
        ("day", "days"),
        ("box", "boxes"),
        ("match", "matches"),
        ("", ""),
    ],
)
def test_pluralize(word: str, expected: str) -> None:
    assert pluralize(word) == expected


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (KeyCase.UNDERSCORE, "special_books"),
        (KeyCase.CAMELIZE, "specialBooks"),
        (KeyCase.DASHERIZE, "special-books"),
        (KeyCase.NONE, "special-Books"),
    ],
)
def test_key_formatter(case: KeyCase, expected: str) -> None:
    assert key_formatter(case)("special-Books") == expected
