"""
Build orchestrator.

Runs one complete build, strictly in sequence:

1. load the dark source document
2. derive the light document and persist it
3. for each theme, merge its sources and resolve the token dictionary
4. render every configured format and write it into the build path

Any error aborts the run. There is no partial rollback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from ..formatters import get_registry
from .config import BuildConfig
from .dictionary import build_dictionary, merge_documents
from .errors import BuildError
from .inversion import InversionTable, invert_document
from .ir.tokens import FileContext, Theme
from .store import load_document, load_documents, save_document

logger = logging.getLogger(__name__)


@dataclass
class ThemeResult:
    theme: Theme
    token_count: int
    files: list[Path] = field(default_factory=list)


@dataclass
class BuildReport:
    """What a build produced."""

    light_document: Path
    generated_at: datetime
    themes: list[ThemeResult] = field(default_factory=list)

    @property
    def files(self) -> list[Path]:
        return [path for result in self.themes for path in result.files]


def derive_light_document(source: Path, destination: Path, table: InversionTable) -> Path:
    """Load the dark document, invert it, and save the light document."""
    logger.info("Loading tokens from %s", source)
    dark = load_document(source)

    light = invert_document(dark, table)
    save_document(light, destination)
    logger.info("Light tokens saved to %s", destination)
    return destination


def write_output(path: Path, content: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Cannot write output: {e}", path) from e
    return path


def run_build(config: BuildConfig, *, generated_at: datetime | None = None) -> BuildReport:
    """
    Run a full build.

    Args:
        config: Resolved build configuration.
        generated_at: Timestamp for file headers. Defaults to now (UTC).

    Returns:
        BuildReport listing everything written.

    Raises:
        TokenLoadError: Source missing or invalid.
        TokenResolutionError: Broken reference in a source document.
        FormatterError: Unknown format name in the configuration.
        BuildError: An output could not be written.
    """
    generated_at = generated_at or datetime.now(UTC)
    registry = get_registry()

    # Fail before writing anything if a format is unknown
    formatters = {name: registry.get(name) for name in config.formats}
    extensions = {name: formatter.extension for name, formatter in formatters.items()}

    light_path = derive_light_document(
        config.source, config.light_output, config.inversion_table
    )
    report = BuildReport(light_document=light_path, generated_at=generated_at)

    for target in config.theme_targets(extensions):
        logger.info("Building %s tokens", target.theme.value)
        document = merge_documents(*load_documents(target.sources))
        dictionary = build_dictionary(document)
        result = ThemeResult(theme=target.theme, token_count=len(dictionary))

        for output in target.files:
            context = FileContext(destination=output.destination, generated_at=generated_at)
            content = formatters[output.format].format(
                dictionary.all_records, target.options, context
            )
            path = write_output(config.build_path / output.destination, content)
            logger.info("Wrote %s", path)
            result.files.append(path)

        report.themes.append(result)

    logger.info("All tokens generated in %s", config.build_path)
    return report
