"""
Formatter contract and shared output conventions.

Formatters turn resolved TokenRecords into the text of one output file.
They are pure: no file I/O, no clock reads, no mutation of their inputs.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from ..core.ir.tokens import FileContext, FormatOptions, TokenRecord


@dataclass
class FormatterInfo:
    """
    Describes a formatter.

    Used for introspection and CLI help text.
    """

    name: str
    description: str
    extension: str


class Formatter(ABC):
    """
    Abstract base class for all output formatters.

    Subclasses set ``name``, ``extension`` and ``description`` and
    implement ``format``.
    """

    name: str = ""
    extension: str = ""
    description: str = "No description provided"

    @abstractmethod
    def format(
        self,
        records: Sequence[TokenRecord],
        options: FormatOptions,
        context: FileContext,
    ) -> str:
        """
        Render token records to text.

        Args:
            records: Resolved tokens in document order
            options: Prefixes and category names for this file
            context: Output file name and generation timestamp

        Returns:
            Complete file contents
        """
        pass

    def get_info(self) -> FormatterInfo:
        return FormatterInfo(
            name=self.name or self.__class__.__name__,
            description=self.description,
            extension=self.extension,
        )


def format_timestamp(generated_at: datetime) -> str:
    """UTC with millisecond precision, e.g. ``2024-05-06T07:08:09.000Z``."""
    stamp = generated_at.astimezone(UTC).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def render_value(value: Any) -> str:
    """Strings verbatim; anything else as JSON (``true``, ``16``, ``{"a": 1}``)."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def render_header(generated_at: datetime) -> str:
    """The comment block every generated text file starts with."""
    return (
        "/*\n"
        " * Auto-generated Design Tokens\n"
        " * DO NOT EDIT MANUALLY\n"
        f" * Generated at: {format_timestamp(generated_at)}\n"
        " */\n"
    )


def capitalize_words(kebab: str) -> list[str]:
    """``"color-bg-default"`` -> ``["Color", "Bg", "Default"]``."""
    return [part[:1].upper() + part[1:] for part in kebab.split("-") if part]


def replace_prefix(name: str, category: str, replacement: str) -> str:
    """Replace the first ``"<category>-"`` in ``name`` with ``replacement``."""
    return name.replace(f"{category}-", replacement, 1)
