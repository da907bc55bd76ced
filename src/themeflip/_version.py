"""Installed distribution version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("themeflip")
    except PackageNotFoundError:
        # Running from a source checkout without `pip install -e .`
        return "0.0.0+unknown"
