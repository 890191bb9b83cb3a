"""Runtime settings and configuration file loading."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings

from .exceptions import ConfigError, ConfigNotFoundError
from .models import VaultConfig

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """obsd runtime settings loaded from environment variables."""

    # Explicit config file, checked before the default locations
    config_path: Path | None = None

    # Overrides vaultPath from the config file
    vault_path: Path | None = None

    config_filename: str = "templates.yml"
    log_level: str = "WARNING"

    class Config:
        env_prefix = "OBSD_"
        env_file = ".env"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get or create the Settings singleton."""
    return Settings()


def candidate_paths(settings: Settings) -> list[Path]:
    """Config file locations in lookup order."""
    candidates = []
    if settings.config_path:
        candidates.append(settings.config_path.expanduser())
    candidates.append(PACKAGE_DIR / settings.config_filename)
    candidates.append(Path.cwd() / settings.config_filename)
    return candidates


def find_config_path(settings: Settings | None = None) -> Path:
    """Return the first existing config file.

    Raises:
        ConfigNotFoundError: if no candidate exists
    """
    settings = settings or get_settings()
    tried = candidate_paths(settings)
    for path in tried:
        if path.is_file():
            return path
    raise ConfigNotFoundError(tried)


def parse_config(text: str, source: Path | str = "<string>") -> VaultConfig:
    """Parse and validate a YAML configuration document."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {source}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {source} must be a mapping, got {type(data).__name__}")

    try:
        return VaultConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {source}:\n{e}") from e


def load_config(settings: Settings | None = None) -> VaultConfig:
    """Locate, parse and validate the configuration for this invocation."""
    settings = settings or get_settings()
    path = find_config_path(settings)
    logger.debug(f"Loading config from {path}")

    config = parse_config(path.read_text(encoding="utf-8"), source=path)

    if settings.vault_path:
        config = config.model_copy(update={"vault_path": settings.vault_path.expanduser()})
        logger.debug(f"Vault path overridden: {config.vault_path}")

    return config
