"""
Error types for themeflip token loading, resolution, formatting, and builds.
"""

from pathlib import Path


class ThemeflipError(Exception):
    """Base exception for all themeflip errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending file if known."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class TokenLoadError(ThemeflipError):
    """
    Raised when a token document cannot be read.

    Examples:
    - Source file missing
    - Invalid JSON
    - Top level is not an object
    """

    pass


class TokenResolutionError(ThemeflipError):
    """
    Raised when a token reference cannot be resolved.

    Examples:
    - Reference to a path that is not a token
    - Circular references
    """

    pass


class FormatterError(ThemeflipError):
    """
    Raised when a formatter cannot be registered or looked up.

    Examples:
    - Duplicate formatter name
    - Unknown formatter requested by a build target
    """

    pass


class ConfigError(ThemeflipError):
    """Raised when themeflip.toml is malformed."""

    pass


class BuildError(ThemeflipError):
    """
    Raised when a build fails to write its artifacts.

    Examples:
    - Output directory not writable
    - Disk full
    """

    pass
