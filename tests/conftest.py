from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from jsonapi_orm.adapters.jsonapi import DocumentParser
from tests.support.documents import author_document
from tests.support.models import registry

if TYPE_CHECKING:
    from jsonapi_orm.domain.model import TypeRegistry


@pytest.fixture
def type_registry() -> TypeRegistry:
    return registry


@pytest.fixture
def parser(type_registry: TypeRegistry) -> DocumentParser:
    return DocumentParser(type_registry.resolve)


@pytest.fixture
def document() -> dict[str, Any]:
    return author_document()
