"""
themeflip - derive light design tokens from dark ones and render them.

Reads a dark token document, inverts its semantic colors through a curated
table, and renders both themes as CSS, SCSS, TypeScript, and JSON.
"""

from __future__ import annotations

from ._version import get_version
from .core.build import BuildReport, run_build
from .core.config import BuildConfig, load_build_config
from .core.dictionary import TokenDictionary, build_dictionary, merge_documents
from .core.errors import (
    BuildError,
    ConfigError,
    FormatterError,
    ThemeflipError,
    TokenLoadError,
    TokenResolutionError,
)
from .core.inversion import DEFAULT_INVERSION_TABLE, InversionTable, invert_document
from .formatters import get_formatter, list_formatters

__version__ = get_version()

__all__ = [
    "__version__",
    # Inversion
    "InversionTable",
    "DEFAULT_INVERSION_TABLE",
    "invert_document",
    # Dictionary
    "TokenDictionary",
    "build_dictionary",
    "merge_documents",
    # Formatters
    "get_formatter",
    "list_formatters",
    # Build
    "BuildConfig",
    "BuildReport",
    "load_build_config",
    "run_build",
    # Errors
    "ThemeflipError",
    "TokenLoadError",
    "TokenResolutionError",
    "FormatterError",
    "ConfigError",
    "BuildError",
]
