"""
Token store: reading and writing token documents as JSON.

The dark document is hand-authored; the light document is a derived
artifact that is fully overwritten on every build.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import BuildError, TokenLoadError

logger = logging.getLogger(__name__)


def load_document(path: Path) -> dict[str, Any]:
    """
    Load a token document.

    Args:
        path: JSON file to read.

    Returns:
        Parsed document.

    Raises:
        TokenLoadError: If the file is missing, unreadable, not JSON, or not an object.
    """
    if not path.exists():
        raise TokenLoadError("Token file not found", path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TokenLoadError(f"Invalid JSON: {e}", path) from e
    except UnicodeDecodeError as e:
        raise TokenLoadError(f"Token file is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise TokenLoadError(f"Cannot read token file: {e}", path) from e

    if not isinstance(data, dict):
        raise TokenLoadError(
            f"Token document must be a JSON object, got {type(data).__name__}", path
        )

    logger.debug("Loaded token document from %s", path)
    return data


def load_documents(paths: list[Path]) -> list[dict[str, Any]]:
    return [load_document(path) for path in paths]


def save_document(document: Mapping[str, Any], path: Path) -> Path:
    """
    Write a token document, creating parent directories as needed.

    Args:
        document: Token document.
        path: Destination file. Overwritten if it exists.

    Returns:
        The path written.

    Raises:
        BuildError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        raise BuildError(f"Cannot write token document: {e}", path) from e

    logger.debug("Saved token document to %s", path)
    return path
