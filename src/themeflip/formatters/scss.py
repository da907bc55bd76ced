"""
Style-variable (SCSS) formatter.

Emits three sorted blocks:

1. a mixin holding CSS custom properties for every semantic token, with
   values taken from the primitive the token points at;
2. SCSS variables aliasing those custom properties with ``var()``;
3. component variables aliasing the semantic SCSS variable they compose.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.ir.tokens import FileContext, FormatOptions, TokenRecord
from .base import Formatter, render_header, render_value, replace_prefix

Lookup = dict[str, dict[str, TokenRecord]]


def build_lookup(records: Sequence[TokenRecord]) -> Lookup:
    """category -> reference key -> record."""
    lookup: Lookup = {}
    for record in records:
        lookup.setdefault(record.category, {})[record.key] = record
    return lookup


def css_custom_properties(lookup: Lookup, options: FormatOptions) -> list[str]:
    names = options.category_name
    css_var = options.var_prefix.css_var
    primitives = lookup.get(names.primitive, {})

    lines = []
    for record in lookup.get(names.semantic, {}).values():
        name = replace_prefix(record.name, names.semantic, css_var)
        primitive = primitives.get(str(record.original_value))
        value = (primitive.value if primitive else None) or record.value
        lines.append(f"{name}: {render_value(value)};")
    return sorted(lines)


def semantic_variables(lookup: Lookup, options: FormatOptions) -> list[str]:
    names = options.category_name
    lines = []
    for record in lookup.get(names.semantic, {}).values():
        name = replace_prefix(record.name, names.semantic, options.var_prefix.style_var)
        css_name = replace_prefix(record.name, names.semantic, options.var_prefix.css_var)
        lines.append(f"{name}: var({css_name});")
    return sorted(lines)


def component_variables(lookup: Lookup, options: FormatOptions) -> list[str]:
    names = options.category_name
    style_var = options.var_prefix.style_var
    semantics = lookup.get(names.semantic, {})

    lines = []
    for record in lookup.get(names.component, {}).values():
        name = replace_prefix(record.name, names.component, style_var)
        original = str(record.original_value)
        target = semantics.get(original)
        semantic_name = target.name if target else original
        lines.append(f"{name}: {replace_prefix(semantic_name, names.semantic, style_var)};")
    return sorted(lines)


class ScssFormatter(Formatter):
    """SCSS variables backed by CSS custom properties."""

    name = "scss"
    extension = "scss"
    description = "SCSS mixin of CSS custom properties plus semantic and component variables"

    def format(
        self,
        records: Sequence[TokenRecord],
        options: FormatOptions,
        context: FileContext,
    ) -> str:
        lookup = build_lookup(records)
        css_vars = "\n  ".join(css_custom_properties(lookup, options))
        semantic = "\n".join(semantic_variables(lookup, options))
        component = "\n".join(component_variables(lookup, options))

        return (
            f"{render_header(context.generated_at)}\n"
            "\n"
            "// CSS Custom Properties\n"
            f"@mixin {options.mixin_name} {{\n"
            f"  {css_vars}\n"
            "}\n"
            "\n"
            "// Semantic Design Tokens - Themeable tokens\n"
            f"{semantic}\n"
            "\n"
            "// Component Design Tokens - Component specific composition tokens\n"
            f"{component}\n"
        )
