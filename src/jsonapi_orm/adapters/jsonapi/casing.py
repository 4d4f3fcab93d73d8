"""Key casing between wire documents and declared entity fields."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from jsonapi_orm.common import camelize, dasherize, underscore

if TYPE_CHECKING:
    from collections.abc import Callable


class KeyCase(StrEnum):
    """Casing convention of the local (declared) field names."""

    UNDERSCORE = "underscore"
    CAMELIZE = "camelize"
    DASHERIZE = "dasherize"
    NONE = "none"


def _identity(key: str) -> str:
    return key


_FORMATTERS: dict[KeyCase, Callable[[str], str]] = {
    KeyCase.UNDERSCORE: underscore,
    KeyCase.CAMELIZE: camelize,
    KeyCase.DASHERIZE: dasherize,
    KeyCase.NONE: _identity,
}


def key_formatter(case: KeyCase) -> Callable[[str], str]:
    """Return the wire-key -> local-key function for ``case``."""
    return _FORMATTERS[case]
