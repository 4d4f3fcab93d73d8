"""Word inflection used for key casing and default type names."""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SEPARATORS = re.compile(r"[-\s]+")


def underscore(word: str) -> str:
    """``firstName`` / ``first-name`` / ``FirstName`` -> ``first_name``."""

    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return _SEPARATORS.sub("_", word).lower()


def camelize(word: str) -> str:
    """``first_name`` / ``first-name`` -> ``firstName``."""

    head, *rest = re.split(r"[_\-\s]+", word)
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def dasherize(word: str) -> str:
    return underscore(word).replace("_", "-")


def pluralize(word: str) -> str:
    if not word:
        return word
    if word.endswith("y") and word[-2:-1] not in {"a", "e", "i", "o", "u"}:
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"
