"""Errors raised by vault operations.

Services raise these; the CLI turns them into a stderr message and exit code 1.
"""

from __future__ import annotations

from pathlib import Path


class VaultError(Exception):
    """Base class for every handled obsd failure."""


class ConfigError(VaultError):
    """Configuration file could not be parsed or validated."""


class ConfigNotFoundError(ConfigError, FileNotFoundError):
    """No configuration file exists at any candidate location."""

    def __init__(self, tried: list[Path]):
        self.tried = tried
        lines = ["Templates file not found!", "Tried:"]
        lines.extend(f"  - {path}" for path in tried)
        super().__init__("\n".join(lines))

    def __str__(self) -> str:
        return self.args[0]


class TemplateNotFoundError(VaultError):
    """No template is configured for the requested entity type."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Template '{name}' not found in templates.yml")


class VaultValidationError(VaultError, ValueError):
    """A command option is missing or malformed."""


class EntityLookupError(VaultError, FileNotFoundError):
    """A project, area, resource or item could not be found."""

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class EntityExistsError(VaultError, FileExistsError):
    """The target path of a create or move already exists."""

    def __init__(self, kind: str, path: Path):
        self.kind = kind
        self.path = path
        super().__init__(f"✗ {kind} already exists: {path}")

    def __str__(self) -> str:
        return self.args[0]
