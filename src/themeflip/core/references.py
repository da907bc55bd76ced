"""
Token reference parsing.

References are written as ``{a.b.c}``: a dotted path wrapped in braces.
Primitive color references have the fixed form
``{primitive.color.<family>.<step>}``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Any {dotted.path} occurrence inside a value
REFERENCE_PATTERN = re.compile(r"\{([^{}]+)\}")

# First primitive color reference inside a value; group 1 is "<family>.<step>"
PRIMITIVE_COLOR_PATTERN = re.compile(r"\{primitive\.color\.([^}]+)\}")


@dataclass(frozen=True)
class TokenReference:
    """A parsed ``{dotted.path}`` reference."""

    path: tuple[str, ...]

    @classmethod
    def parse(cls, value: object) -> TokenReference | None:
        """Parse a value that is exactly one reference, else return None."""
        if not isinstance(value, str):
            return None
        match = REFERENCE_PATTERN.fullmatch(value.strip())
        if match is None:
            return None
        return cls.from_dotted(match.group(1))

    @classmethod
    def from_dotted(cls, dotted: str) -> TokenReference:
        return cls(path=tuple(dotted.split(".")))

    @property
    def category(self) -> str:
        return self.path[0]

    @property
    def dotted(self) -> str:
        return ".".join(self.path)

    @property
    def is_primitive_color(self) -> bool:
        return len(self.path) > 2 and self.path[0] == "primitive" and self.path[1] == "color"

    @property
    def color_key(self) -> str | None:
        """``<family>.<step>`` for primitive color references."""
        if not self.is_primitive_color:
            return None
        return ".".join(self.path[2:])

    @property
    def family(self) -> str | None:
        return self.path[2] if self.is_primitive_color else None

    @property
    def step(self) -> str | None:
        if not self.is_primitive_color or len(self.path) < 4:
            return None
        return ".".join(self.path[3:])

    def __str__(self) -> str:
        return "{" + self.dotted + "}"


def primitive_color(key: str) -> str:
    """Build the reference string for a ``<family>.<step>`` key."""
    return f"{{primitive.color.{key}}}"


def extract_primitive_color(value: object) -> str | None:
    """Return the ``<family>.<step>`` of the first primitive color reference in ``value``."""
    if not isinstance(value, str):
        return None
    match = PRIMITIVE_COLOR_PATTERN.search(value)
    return match.group(1) if match else None

