"""
Formatter plugin system for themeflip.

Formatters render resolved token records into one output file format.
Built-in formatters are registered by name:

- ts: TypeScript typed constants (semantic tokens)
- scss: SCSS variables over CSS custom properties
- css: flat CSS custom properties under a theme selector
- json: nested JSON projection
"""

from __future__ import annotations

from ..core.errors import FormatterError
from .base import Formatter, FormatterInfo, render_header
from .css import CssFormatter
from .nested_json import JsonFormatter
from .scss import ScssFormatter
from .typescript import TypeScriptFormatter

BUILTIN_FORMATTERS: tuple[type[Formatter], ...] = (
    TypeScriptFormatter,
    ScssFormatter,
    CssFormatter,
    JsonFormatter,
)


class FormatterRegistry:
    """
    Registry for formatter plugins.

    Supports:
    - Manual registration via register()
    - Lookup by name
    """

    def __init__(self) -> None:
        self._formatters: dict[str, type[Formatter]] = {}

    def register(self, name: str, formatter_class: type[Formatter]) -> None:
        """
        Register a formatter class.

        Args:
            name: Formatter name (used in themeflip.toml ``formats``)
            formatter_class: Formatter class (must extend Formatter)

        Raises:
            FormatterError: If name already registered or class invalid
        """
        if name in self._formatters:
            raise FormatterError(
                f"Formatter '{name}' is already registered. "
                f"Cannot register {formatter_class.__name__}."
            )

        if not isinstance(formatter_class, type) or not issubclass(formatter_class, Formatter):
            raise FormatterError(f"Formatter class {formatter_class!r} must extend Formatter")

        self._formatters[name] = formatter_class

    def get(self, name: str) -> Formatter:
        """
        Get a formatter instance by name.

        Raises:
            FormatterError: If formatter not found
        """
        if name not in self._formatters:
            available = list(self._formatters.keys())
            raise FormatterError(f"Formatter '{name}' not found. Available formatters: {available}")

        return self._formatters[name]()

    def list_formatters(self) -> list[str]:
        return list(self._formatters.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._formatters


# Global registry instance
_registry: FormatterRegistry | None = None


def get_registry() -> FormatterRegistry:
    """
    Get the global formatter registry.

    Registers the built-in formatters on first call.
    """
    global _registry
    if _registry is None:
        _registry = FormatterRegistry()
        for formatter_class in BUILTIN_FORMATTERS:
            _registry.register(formatter_class.name, formatter_class)
    return _registry


def register_formatter(name: str, formatter_class: type[Formatter]) -> None:
    """Register a formatter in the global registry."""
    get_registry().register(name, formatter_class)


def get_formatter(name: str) -> Formatter:
    """
    Get a formatter instance by name.

    Raises:
        FormatterError: If formatter not found
    """
    return get_registry().get(name)


def list_formatters() -> list[str]:
    return get_registry().list_formatters()


__all__ = [
    "Formatter",
    "FormatterInfo",
    "FormatterRegistry",
    "TypeScriptFormatter",
    "ScssFormatter",
    "CssFormatter",
    "JsonFormatter",
    "render_header",
    "get_registry",
    "register_formatter",
    "get_formatter",
    "list_formatters",
]
