"""End-to-end tests for the build orchestrator."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from themeflip.core.build import derive_light_document, run_build
from themeflip.core.config import default_build_config, load_build_config
from themeflip.core.errors import FormatterError, TokenLoadError, TokenResolutionError
from themeflip.core.inversion import DEFAULT_INVERSION_TABLE
from themeflip.core.ir.tokens import Theme

GENERATED_AT = datetime(2024, 5, 6, 7, 8, 9, tzinfo=UTC)


class TestDeriveLightDocument:
    """Tests for the invert-and-persist step."""

    def test_writes_light_document(self, dark_tokens_path: Path, tmp_path: Path):
        destination = tmp_path / "out" / "light-mode.json"
        derive_light_document(dark_tokens_path, destination, DEFAULT_INVERSION_TABLE)
        light = json.loads(destination.read_text())
        assert light["semantic"]["color"]["bg"]["default"]["value"] == (
            "{primitive.color.neutral.0}"
        )

    def test_missing_source(self, tmp_path: Path):
        with pytest.raises(TokenLoadError):
            derive_light_document(
                tmp_path / "missing.json", tmp_path / "light.json", DEFAULT_INVERSION_TABLE
            )
        assert not (tmp_path / "light.json").exists()


class TestRunBuild:
    """Tests for a full build run."""

    def test_writes_all_outputs(self, project: Path):
        config = default_build_config(project)
        report = run_build(config, generated_at=GENERATED_AT)

        assert report.light_document == config.light_output
        assert config.light_output.exists()
        assert [result.theme for result in report.themes] == [Theme.LIGHT, Theme.DARK]
        assert sorted(path.name for path in report.files) == [
            "_tokens-dark.scss",
            "_tokens-light.scss",
            "tokens-dark.css",
            "tokens-dark.ts",
            "tokens-light.css",
            "tokens-light.ts",
        ]
        for path in report.files:
            assert path.parent == config.build_path
            assert path.read_text().startswith("/*\n * Auto-generated Design Tokens")
            assert "Generated at: 2024-05-06T07:08:09.000Z" in path.read_text()
        assert all(result.token_count == 20 for result in report.themes)

    def test_light_and_dark_css(self, project: Path):
        config = default_build_config(project)
        run_build(config, generated_at=GENERATED_AT)

        light = (config.build_path / "tokens-light.css").read_text()
        dark = (config.build_path / "tokens-dark.css").read_text()
        assert ':root, [data-theme="light"] {' in light
        assert '[data-theme="dark"] {' in dark
        assert "  --semantic-semantic-color-bg-default: #ffffff;" in light
        assert "  --semantic-semantic-color-bg-default: #121212;" in dark
        # Theme-invariant brand color
        assert "  --semantic-semantic-color-brand: #ff5a1f;" in light
        assert "  --semantic-semantic-color-brand: #ff5a1f;" in dark

    def test_scss_uses_theme_prefix(self, project: Path):
        config = default_build_config(project)
        run_build(config, generated_at=GENERATED_AT)

        light = (config.build_path / "_tokens-light.scss").read_text()
        dark = (config.build_path / "_tokens-dark.scss").read_text()
        assert "@mixin lightCssCustomProperties {" in light
        assert "$ui-light-color-accent: var(--semantic-color-accent);" in light
        assert "  --semantic-color-accent: #0b3fa8;" in light
        assert "@mixin darkCssCustomProperties {" in dark
        assert "$ui-dark-button-bg: $ui-dark-color-accent;" in dark
        assert "  --semantic-color-accent: #8ab4ff;" in dark

    def test_typescript_output(self, project: Path):
        config = default_build_config(project)
        run_build(config, generated_at=GENERATED_AT)

        ts = (config.build_path / "tokens-light.ts").read_text()
        assert '"token": "$ui-light-color-bg-default"' in ts
        assert '"value": "#ffffff"' in ts

    def test_light_document_is_overwritten(self, project: Path):
        config = default_build_config(project)
        config.light_output.parent.mkdir(parents=True)
        config.light_output.write_text('{"stale": {"value": "x"}}')

        run_build(config, generated_at=GENERATED_AT)
        assert "stale" not in json.loads(config.light_output.read_text())

    def test_configured_formats(self, project: Path):
        (project / "themeflip.toml").write_text('[themes]\nformats = ["json"]\n')
        config = load_build_config(project)
        report = run_build(config, generated_at=GENERATED_AT)

        assert sorted(path.name for path in report.files) == [
            "tokens-dark.json",
            "tokens-light.json",
        ]
        data = json.loads((config.build_path / "tokens-light.json").read_text())
        assert data["semantic"]["color"]["accent"]["value"] == "#0b3fa8"

    def test_unknown_format_fails_before_writing(self, project: Path):
        config = default_build_config(project)
        config.formats = ["css", "yaml"]
        with pytest.raises(FormatterError):
            run_build(config)
        assert not config.light_output.exists()
        assert not config.build_path.exists()

    def test_missing_source(self, tmp_path: Path):
        with pytest.raises(TokenLoadError):
            run_build(default_build_config(tmp_path))

    def test_broken_reference(self, project: Path):
        config = default_build_config(project)
        config.source.write_text(
            json.dumps({"semantic": {"bg": {"value": "{primitive.nope}", "type": "color"}}})
        )
        with pytest.raises(TokenResolutionError):
            run_build(config)

    def test_inversion_overrides(self, project: Path):
        (project / "themeflip.toml").write_text('[inversion]\n"brand.50" = "neutral.0"\n')
        config = load_build_config(project)
        run_build(config, generated_at=GENERATED_AT)

        light = json.loads(config.light_output.read_text())
        assert light["semantic"]["color"]["brand"]["value"] == "{primitive.color.neutral.0}"
