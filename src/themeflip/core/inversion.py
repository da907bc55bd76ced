"""
Dark-to-light color inversion.

The light token set is derived from the hand-authored dark set by swapping
primitive color references in the ``semantic`` category for their
perceptual inverse. The inverse of each palette slot comes from a curated
table; it is never computed.

Tokens whose reference has no table entry, or whose value is not a
primitive color reference at all, are theme-invariant and stay as they are.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .ir.tree import ColorLeaf, GroupNode, map_color_leaves, parse_tree
from .references import extract_primitive_color, primitive_color

logger = logging.getLogger(__name__)

SEMANTIC_CATEGORY = "semantic"

# <family>.<step> -> <family>.<step>
_DEFAULT_ENTRIES: dict[str, str] = {
    # Neutrals
    "neutral.0": "neutral.200",
    "neutral.10": "neutral.190",
    "neutral.30": "neutral.180",
    "neutral.50": "neutral.170",
    "neutral.100": "neutral.160",
    "neutral.160": "neutral.100",
    "neutral.170": "neutral.50",
    "neutral.180": "neutral.30",
    "neutral.190": "neutral.10",
    "neutral.200": "neutral.0",
    # Blues
    "blue.40": "blue.80",
    "blue.60": "blue.60",
    "blue.80": "blue.40",
    # Pinks
    "pink.40": "pink.80",
    "pink.50": "pink.60",
    "pink.60": "pink.50",
    "pink.80": "pink.40",
    # Greens
    "green.40": "green.80",
    "green.60": "green.60",
    "green.80": "green.40",
    # Reds
    "red.40": "red.80",
    "red.60": "red.60",
    "red.80": "red.40",
    # Oranges
    "orange.40": "orange.80",
    "orange.60": "orange.60",
    "orange.80": "orange.40",
    # Yellows
    "yellow.40": "yellow.80",
    "yellow.60": "yellow.60",
    "yellow.80": "yellow.40",
    # Teals
    "teal.40": "teal.80",
    "teal.60": "teal.60",
    "teal.80": "teal.40",
}


class InversionTable(Mapping[str, str]):
    """
    Immutable mapping of primitive color slots to their inverse.

    Example:
        table = InversionTable({"blue.40": "blue.80", "blue.80": "blue.40"})
        table.invert("blue.40")  # "blue.80"
        table.invert("brand.50")  # None
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"InversionTable({len(self)} entries)"

    def invert(self, key: str) -> str | None:
        return self._entries.get(key)

    def fixed_points(self) -> list[str]:
        """Keys that map to themselves (mid-tones that read the same in both themes)."""
        return [key for key, value in self._entries.items() if key == value]

    def is_involutive(self, key: str) -> bool:
        """True if inverting ``key`` twice returns ``key``."""
        inverted = self._entries.get(key)
        return inverted is not None and self._entries.get(inverted) == key

    def involutive_pairs(self) -> list[tuple[str, str]]:
        """Distinct ``(a, b)`` pairs with ``a -> b`` and ``b -> a``, fixed points excluded."""
        pairs: list[tuple[str, str]] = []
        for key, value in self._entries.items():
            if key != value and self.is_involutive(key) and (value, key) not in pairs:
                pairs.append((key, value))
        return pairs

    def merged(self, overrides: Mapping[str, str]) -> InversionTable:
        """New table with ``overrides`` added on top of these entries."""
        return InversionTable({**self._entries, **overrides})


DEFAULT_INVERSION_TABLE = InversionTable(_DEFAULT_ENTRIES)


def invert_color_leaf(leaf: ColorLeaf, table: InversionTable) -> ColorLeaf:
    """Swap the leaf's primitive color reference for its inverse, if it has one."""
    color_ref = extract_primitive_color(leaf.value)
    if color_ref is None:
        logger.debug("Not a primitive color reference, kept: %s", leaf.value)
        return leaf

    inverted = table.invert(color_ref)
    if inverted is None:
        logger.debug("No inverse for %s, kept as theme-invariant", color_ref)
        return leaf

    logger.info("Inverted: %s -> %s", color_ref, inverted)
    return leaf.with_value(primitive_color(inverted))


def invert_document(
    document: Mapping[str, Any],
    table: InversionTable = DEFAULT_INVERSION_TABLE,
) -> dict[str, Any]:
    """
    Derive a light token document from a dark one.

    Only color tokens under the ``semantic`` category are touched, and only
    their ``value``. The input is deep-copied and never mutated.

    Args:
        document: Dark token document.
        table: Inversion table to apply.

    Returns:
        New light token document with the same structure.
    """
    light: dict[str, Any] = copy.deepcopy(dict(document))

    semantic = light.get(SEMANTIC_CATEGORY)
    if not isinstance(semantic, dict):
        return light

    tree = GroupNode(children={key: parse_tree(child) for key, child in semantic.items()})
    light[SEMANTIC_CATEGORY] = map_color_leaves(
        tree, lambda leaf: invert_color_leaf(leaf, table)
    ).to_raw()
    return light
