"""Include directives: which relationship paths a call is concerned with.

Callers may describe paths as a relationship name, a dotted path
(``"books.genre"``), a sequence of either, or a nested mapping
(``{"books": {"genre": {}}}``). All forms normalise to one recursive
``IncludeDirective`` whose leaves are empty directives.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

type IncludeSpec = (
    str | Iterable[IncludeSpec] | Mapping[str, IncludeSpec] | IncludeDirective | None
)

_PATH_SEPARATOR = "."


class IncludeDirective(Mapping[str, "IncludeDirective"]):
    """Immutable tree of relationship names."""

    __slots__ = ("_children",)

    def __init__(self, children: Mapping[str, IncludeDirective] | None = None) -> None:
        self._children: dict[str, IncludeDirective] = dict(children or {})

    @classmethod
    def from_spec(cls, spec: IncludeSpec) -> IncludeDirective:
        if isinstance(spec, IncludeDirective):
            return spec
        tree: dict[str, Any] = {}
        _collect(spec, tree)
        return _freeze(tree)

    def __getitem__(self, name: str) -> IncludeDirective:
        return self._children[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def child(self, name: str) -> IncludeDirective:
        """Nested directive below ``name``; empty when the name is not included."""
        return self._children.get(name, _EMPTY)

    def to_dict(self) -> dict[str, Any]:
        return {name: child.to_dict() for name, child in self._children.items()}

    def __repr__(self) -> str:
        return f"IncludeDirective({self.to_dict()!r})"


_EMPTY = IncludeDirective()


def _collect(spec: IncludeSpec, tree: dict[str, Any]) -> None:
    if spec is None:
        return
    if isinstance(spec, str):
        _walk(tree, spec)
        return
    if isinstance(spec, Mapping):
        for key, value in spec.items():
            if not isinstance(key, str):
                raise TypeError(f"include keys must be strings, got {key!r}")
            node = _walk(tree, key)
            _collect(value, node)
        return
    if isinstance(spec, Iterable):
        for item in spec:
            _collect(item, tree)
        return
    raise TypeError(f"unsupported include directive: {spec!r}")


def _walk(tree: dict[str, Any], path: str) -> dict[str, Any]:
    node = tree
    for segment in path.split(_PATH_SEPARATOR):
        name = segment.strip()
        if name:
            node = node.setdefault(name, {})
    return node


def _freeze(tree: dict[str, Any]) -> IncludeDirective:
    return IncludeDirective({name: _freeze(child) for name, child in tree.items()})
