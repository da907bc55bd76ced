"""
Typed-constants formatter.

Exports semantic tokens as a TypeScript module: two interfaces and a
``designTokens`` constant grouped by category and token group.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from ..core.ir.tokens import FileContext, FormatOptions, TokenRecord
from .base import Formatter, capitalize_words, render_header

_DECLARATIONS = """\
export interface DesignToken {
  name: string;
  fullName: string;
  category: string;
  group: string;
  token: string;
  type: string;
  value: string;
  css?: string;
}

export interface DesignTokens {
  [category: string]: {
    [group: string]: DesignToken[];
  };
}
"""


def _token_entry(record: TokenRecord, options: FormatOptions) -> dict[str, Any]:
    rest = "-".join(record.path[1:])
    words = capitalize_words(rest)
    entry: dict[str, Any] = {
        "name": " ".join(words[1:]),
        "fullName": " ".join(words),
        "category": record.category,
        "group": record.group,
        "token": f"{options.var_prefix.style_var}{rest}",
        "type": record.type,
        "value": record.value,
    }
    if record.category == options.category_name.semantic:
        entry["css"] = f"var({options.var_prefix.css_var}{rest})"
    return entry


def group_semantic_tokens(
    records: Sequence[TokenRecord], options: FormatOptions
) -> dict[str, dict[str, list[dict[str, Any]]]]:
    """category -> group -> entries, semantic records only, in first-seen order."""
    grouped: dict[str, dict[str, list[dict[str, Any]]]] = {}
    for record in records:
        if record.category != options.category_name.semantic:
            continue
        groups = grouped.setdefault(record.category, {})
        groups.setdefault(record.group, []).append(_token_entry(record, options))
    return grouped


class TypeScriptFormatter(Formatter):
    """Semantic tokens as typed TypeScript constants."""

    name = "ts"
    extension = "ts"
    description = "TypeScript interfaces and a designTokens constant (semantic tokens only)"

    def format(
        self,
        records: Sequence[TokenRecord],
        options: FormatOptions,
        context: FileContext,
    ) -> str:
        tokens = group_semantic_tokens(records, options)
        body = json.dumps(tokens, indent=2, ensure_ascii=False)
        return (
            f"{render_header(context.generated_at)}\n"
            f"{_DECLARATIONS}\n"
            f"export const designTokens: DesignTokens = {body};\n"
            "\n"
            "export default designTokens;\n"
        )
