"""
Build configuration loaded from themeflip.toml.

Every key is optional. Defaults reproduce the standard layout: the dark
source in ``tokens/``, the derived light document in
``design-tokens/tokens/`` and generated files in ``src/app/shared/tokens/``.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .inversion import DEFAULT_INVERSION_TABLE, InversionTable
from .ir.tokens import CategoryNames, FormatOptions, Theme, VarPrefix

logger = logging.getLogger(__name__)

CONFIG_FILE = "themeflip.toml"

DEFAULT_SOURCE = "tokens/design-tokens.tokens.json"
DEFAULT_LIGHT_OUTPUT = "design-tokens/tokens/light-mode.json"
DEFAULT_BUILD_PATH = "src/app/shared/tokens/"
DEFAULT_FORMATS = ["css", "scss", "ts"]


@dataclass
class OutputFile:
    """One generated file."""

    destination: str  # file name inside build_path
    format: str  # registered formatter name


@dataclass
class ThemeTarget:
    """Everything needed to build one theme."""

    theme: Theme
    sources: list[Path]
    options: FormatOptions
    files: list[OutputFile] = field(default_factory=list)


@dataclass
class BuildConfig:
    """Resolved build configuration. Paths are absolute."""

    root: Path
    source: Path
    light_output: Path
    build_path: Path
    css_prefix: str | None = "semantic"
    style_prefix: str | None = "ui"
    categories: CategoryNames = field(default_factory=CategoryNames)
    formats: list[str] = field(default_factory=lambda: list(DEFAULT_FORMATS))
    inversion_overrides: dict[str, str] = field(default_factory=dict)

    @property
    def inversion_table(self) -> InversionTable:
        if not self.inversion_overrides:
            return DEFAULT_INVERSION_TABLE
        return DEFAULT_INVERSION_TABLE.merged(self.inversion_overrides)

    def format_options(self, theme: Theme) -> FormatOptions:
        style = f"{self.style_prefix}-{theme.value}" if self.style_prefix else theme.value
        return FormatOptions(
            var_prefix=VarPrefix(css=self.css_prefix, style=style),
            category_name=self.categories,
            mixin_name=f"{theme.value}CssCustomProperties",
        )

    def theme_targets(self, extensions: dict[str, str] | None = None) -> list[ThemeTarget]:
        """
        Light first (dark source overlaid with the derived light document), then dark.

        Args:
            extensions: Formatter name -> file extension, for formats without a
                built-in file name.
        """
        sources = {
            Theme.LIGHT: [self.source, self.light_output],
            Theme.DARK: [self.source],
        }
        return [
            ThemeTarget(
                theme=theme,
                sources=sources[theme],
                options=self.format_options(theme),
                files=[
                    OutputFile(
                        destination=destination_for(fmt, theme, (extensions or {}).get(fmt)),
                        format=fmt,
                    )
                    for fmt in self.formats
                ],
            )
            for theme in (Theme.LIGHT, Theme.DARK)
        ]


def destination_for(format_name: str, theme: Theme, extension: str | None = None) -> str:
    """Output file name for a format, e.g. ``_tokens-dark.scss``."""
    ext = extension or format_name
    if format_name == "scss":
        return f"_tokens-{theme.value}.{ext}"
    return f"tokens-{theme.value}.{ext}"


def default_build_config(root: Path) -> BuildConfig:
    root = root.resolve()
    return BuildConfig(
        root=root,
        source=root / DEFAULT_SOURCE,
        light_output=root / DEFAULT_LIGHT_OUTPUT,
        build_path=root / DEFAULT_BUILD_PATH,
    )


def _str_table(data: Any, section: str, path: Path) -> dict[str, str]:
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ConfigError(f"[{section}] must map strings to strings", path)
    return dict(data)


def _optional_prefix(value: Any, key: str, path: Path) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigError(f"[prefix] {key} must be a string", path)
    return value


def parse_build_config(data: dict[str, Any], root: Path, path: Path) -> BuildConfig:
    """Build a BuildConfig from parsed TOML data."""
    config = default_build_config(root)

    tokens = data.get("tokens", {})
    prefix = data.get("prefix", {})
    categories = data.get("categories", {})
    themes = data.get("themes", {})

    if "source" in tokens:
        config.source = config.root / tokens["source"]
    if "light_output" in tokens:
        config.light_output = config.root / tokens["light_output"]
    if "build_path" in tokens:
        config.build_path = config.root / tokens["build_path"]

    if "css" in prefix:
        config.css_prefix = _optional_prefix(prefix["css"], "css", path)
    if "style" in prefix:
        config.style_prefix = _optional_prefix(prefix["style"], "style", path)

    if categories:
        config.categories = CategoryNames(**_str_table(categories, "categories", path))

    if "formats" in themes:
        formats = themes["formats"]
        if not isinstance(formats, list) or not all(isinstance(f, str) for f in formats):
            raise ConfigError("[themes] formats must be a list of strings", path)
        config.formats = list(formats)

    if "inversion" in data:
        config.inversion_overrides = _str_table(data["inversion"], "inversion", path)

    return config


def load_build_config(root: Path, config_path: Path | None = None) -> BuildConfig:
    """
    Load themeflip.toml.

    Args:
        root: Project root; relative paths in the file are resolved against it.
        config_path: Explicit config file. Defaults to ``<root>/themeflip.toml``.

    Returns:
        BuildConfig. Defaults when no config file exists.

    Raises:
        ConfigError: If the file is not valid TOML or has wrongly typed keys.
    """
    path = config_path or root / CONFIG_FILE
    if not path.exists():
        if config_path is not None:
            raise ConfigError("Config file not found", path)
        logger.debug("No %s found, using defaults", CONFIG_FILE)
        return default_build_config(root)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", path) from e

    try:
        return parse_build_config(data, root, path)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}", path) from e
