"""Exception hierarchy shared by the scaffolder and the CLI shell."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised while generating a project."""


class InvalidModuleNameError(ScaffoldError, ValueError):
    """Raised when a module name cannot be turned into Java identifiers."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid module name {raw!r}: {reason}")


class UnsupportedConfigFormatError(ScaffoldError, ValueError):
    """Raised for configuration formats other than ``properties`` and ``yml``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Unsupported config file type: {value!r} (expected 'properties' or 'yml')"
        )


class ScaffoldIOError(ScaffoldError):
    """Raised when a directory or file cannot be written.

    The run stops at the first failure; files written before it are left
    in place.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
