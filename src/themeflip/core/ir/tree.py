"""
Typed view of a raw token tree used by the color inverter.

A mapping whose ``type`` is ``"color"`` and which carries a non-empty string
``value`` is a ColorLeaf. Any other mapping is a GroupNode. Everything else
(scalars, arrays) is Opaque and is never traversed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class ColorLeaf:
    """A color token. ``fields`` holds every key of the raw mapping."""

    fields: dict[str, Any]

    @property
    def value(self) -> str:
        value: str = self.fields["value"]
        return value

    def with_value(self, value: str) -> ColorLeaf:
        return replace(self, fields={**self.fields, "value": value})

    def to_raw(self) -> dict[str, Any]:
        return dict(self.fields)


@dataclass(frozen=True)
class GroupNode:
    """A mapping that is not a color token; its children are walked."""

    children: dict[str, TokenNode]

    def to_raw(self) -> dict[str, Any]:
        return {key: child.to_raw() for key, child in self.children.items()}


@dataclass(frozen=True)
class Opaque:
    """A scalar or array, carried through untouched."""

    raw: Any

    def to_raw(self) -> Any:
        return self.raw


TokenNode = ColorLeaf | GroupNode | Opaque


def parse_tree(raw: Any) -> TokenNode:
    """Classify a raw JSON value into the typed tree."""
    if isinstance(raw, dict):
        value = raw.get("value")
        if raw.get("type") == "color" and isinstance(value, str) and value:
            return ColorLeaf(fields=dict(raw))
        return GroupNode(children={key: parse_tree(child) for key, child in raw.items()})
    return Opaque(raw=raw)


def map_color_leaves(node: TokenNode, fn: Callable[[ColorLeaf], ColorLeaf]) -> TokenNode:
    """Return a new tree with ``fn`` applied to every ColorLeaf."""
    if isinstance(node, ColorLeaf):
        return fn(node)
    if isinstance(node, GroupNode):
        return GroupNode(
            children={key: map_color_leaves(child, fn) for key, child in node.children.items()}
        )
    return node
