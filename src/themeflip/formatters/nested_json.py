"""
Generic nested JSON formatter.

Rebuilds the token tree from record paths with ``value``, ``type`` and
``description`` at each leaf. Used for interchange and debugging.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from ..core.ir.tokens import FileContext, FormatOptions, TokenRecord
from .base import Formatter


def nest_records(records: Sequence[TokenRecord]) -> dict[str, Any]:
    """Nested mapping keyed by each record's full path."""
    output: dict[str, Any] = {}
    for record in records:
        current = output
        for key in record.path[:-1]:
            current = current.setdefault(key, {})
        leaf: dict[str, Any] = {"value": record.value, "type": record.type}
        if record.description is not None:
            leaf["description"] = record.description
        current[record.path[-1]] = leaf
    return output


class JsonFormatter(Formatter):
    """All tokens as a nested JSON tree."""

    name = "json"
    extension = "json"
    description = "Nested JSON projection of every token (value, type, description)"

    def format(
        self,
        records: Sequence[TokenRecord],
        options: FormatOptions,
        context: FileContext,
    ) -> str:
        return json.dumps(nest_records(records), indent=2, ensure_ascii=False)
