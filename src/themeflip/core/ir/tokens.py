"""
Token IR types shared by the dictionary builder and the formatters.

A TokenRecord is the flattened, resolved view of one token. Formatters
receive a sequence of records plus FormatOptions and a FileContext and
never look at the raw document.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class TokenCategory(StrEnum):
    """Top-level token categories."""

    PRIMITIVE = "primitive"
    SEMANTIC = "semantic"
    COMPONENT = "component"


class Theme(StrEnum):
    """Themes produced by a build."""

    LIGHT = "light"
    DARK = "dark"


# =============================================================================
# Records
# =============================================================================


class TokenRecord(BaseModel):
    """
    One resolved token.

    Example:
        TokenRecord(
            path=("semantic", "color", "bg", "default"),
            type="color",
            value="#ffffff",
            original_value="{primitive.color.neutral.0}",
        )
    """

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(min_length=1, description="Path segments from the document root")
    type: str | None = Field(default=None, description="Token type, e.g. color or spacing")
    value: Any = Field(default=None, description="Resolved value")
    original_value: Any = Field(
        default=None, description="Value as written in the document"
    )
    description: str | None = Field(default=None, description="Optional human description")

    @property
    def category(self) -> str:
        return self.path[0]

    @property
    def group(self) -> str:
        return self.path[1] if len(self.path) > 1 else ""

    @property
    def name(self) -> str:
        """Kebab-case name, e.g. ``semantic-color-bg-default``."""
        return "-".join(self.path)

    @property
    def key(self) -> str:
        """Reference key, e.g. ``{semantic.color.bg.default}``."""
        return "{" + ".".join(self.path) + "}"


# =============================================================================
# Formatter options
# =============================================================================


class VarPrefix(BaseModel):
    """Variable name prefixes. ``None`` or empty means no prefix."""

    model_config = ConfigDict(frozen=True)

    css: str | None = None
    style: str | None = None

    @property
    def css_var(self) -> str:
        """``--<css>-`` or bare ``--``."""
        return f"--{self.css}-" if self.css else "--"

    @property
    def style_var(self) -> str:
        """``$<style>-`` or bare ``$``."""
        return f"${self.style}-" if self.style else "$"


class CategoryNames(BaseModel):
    """Names used in the document for each category."""

    model_config = ConfigDict(frozen=True)

    primitive: str = TokenCategory.PRIMITIVE.value
    semantic: str = TokenCategory.SEMANTIC.value
    component: str = TokenCategory.COMPONENT.value


class FormatOptions(BaseModel):
    """Per-file formatter options. Shared read-only across a build run."""

    model_config = ConfigDict(frozen=True)

    var_prefix: VarPrefix = Field(default_factory=VarPrefix)
    category_name: CategoryNames = Field(default_factory=CategoryNames)
    mixin_name: str = Field(
        default="lightCssCustomProperties",
        description="SCSS mixin wrapping the CSS custom properties",
    )


class FileContext(BaseModel):
    """The output file a formatter is rendering for."""

    model_config = ConfigDict(frozen=True)

    destination: str = ""
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
