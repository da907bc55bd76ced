"""
Flat CSS custom-property formatter.

One declaration per token, in input order, inside a selector chosen from
the output file name.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.ir.tokens import FileContext, FormatOptions, TokenRecord
from .base import Formatter, render_header, render_value

DARK_SELECTOR = '[data-theme="dark"]'
LIGHT_SELECTOR = ':root, [data-theme="light"]'
ROOT_SELECTOR = ":root"


def selector_for(destination: str) -> str:
    """Pick the theme selector from the output file name."""
    if "dark" in destination:
        return DARK_SELECTOR
    if "light" in destination:
        return LIGHT_SELECTOR
    return ROOT_SELECTOR


class CssFormatter(Formatter):
    """All tokens as CSS custom properties under a theme selector."""

    name = "css"
    extension = "css"
    description = "CSS custom properties for every token, scoped by theme selector"

    def format(
        self,
        records: Sequence[TokenRecord],
        options: FormatOptions,
        context: FileContext,
    ) -> str:
        css_var = options.var_prefix.css_var
        lines = [
            render_header(context.generated_at),
            f"\n{selector_for(context.destination)} {{\n",
        ]
        for record in records:
            lines.append(f"  {css_var}{record.name}: {render_value(record.value)};\n")
        lines.append("}\n")
        return "".join(lines)
