"""
Intermediate representation for themeflip token documents.
"""

from .tokens import (
    CategoryNames,
    FileContext,
    FormatOptions,
    Theme,
    TokenCategory,
    TokenRecord,
    VarPrefix,
)
from .tree import ColorLeaf, GroupNode, Opaque, TokenNode, map_color_leaves, parse_tree

__all__ = [
    # Records and options
    "TokenCategory",
    "Theme",
    "TokenRecord",
    "VarPrefix",
    "CategoryNames",
    "FormatOptions",
    "FileContext",
    # Tree
    "ColorLeaf",
    "GroupNode",
    "Opaque",
    "TokenNode",
    "parse_tree",
    "map_color_leaves",
]
