"""Shared pytest fixtures for themeflip tests."""

import json
import shutil
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def dark_tokens_path(fixtures_dir: Path) -> Path:
    """Return path to the sample dark token document."""
    return fixtures_dir / "design-tokens.tokens.json"


@pytest.fixture
def dark_document(dark_tokens_path: Path) -> dict[str, Any]:
    """Return a fresh copy of the sample dark token document."""
    return json.loads(dark_tokens_path.read_text(encoding="utf-8"))


@pytest.fixture
def project(tmp_path: Path, dark_tokens_path: Path) -> Path:
    """Create a project root with the dark tokens at the default source path."""
    source = tmp_path / "tokens" / "design-tokens.tokens.json"
    source.parent.mkdir(parents=True)
    shutil.copy(dark_tokens_path, source)
    return tmp_path
