"""Shared test fixtures and configuration."""

from __future__ import annotations

import random
from datetime import date
from pathlib import Path

import pytest
import yaml

from obsd.config import PACKAGE_DIR, get_settings, parse_config
from obsd.models import VaultConfig


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep OBSD_* variables from the real environment out of the tests."""
    for var in ("OBSD_CONFIG_PATH", "OBSD_VAULT_PATH", "OBSD_CONFIG_FILENAME", "OBSD_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def vault(tmp_path) -> Path:
    """Empty vault directory."""
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def config_data(vault) -> dict:
    """The packaged templates.yml pointed at the temporary vault."""
    data = yaml.safe_load((PACKAGE_DIR / "templates.yml").read_text(encoding="utf-8"))
    data["vaultPath"] = str(vault)
    return data


@pytest.fixture
def config(config_data) -> VaultConfig:
    return parse_config(yaml.safe_dump(config_data))


@pytest.fixture
def config_file(tmp_path, config_data, monkeypatch) -> Path:
    """Config file on disk, selected through OBSD_CONFIG_PATH."""
    path = tmp_path / "templates.yml"
    path.write_text(yaml.safe_dump(config_data), encoding="utf-8")
    monkeypatch.setenv("OBSD_CONFIG_PATH", str(path))
    get_settings.cache_clear()
    return path


@pytest.fixture
def today() -> date:
    return date(2026, 3, 14)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def project(vault) -> Path:
    """Project folder with prefix 'ab'."""
    path = vault / "00_projects" / "ab_my-site"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def area(vault) -> Path:
    """Area folder with prefix 'pb'."""
    path = vault / "01_areas" / "pb_personal-blog"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def make_item():
    """Write an item file into a status folder of a container."""

    def _make(container: Path, folder: str, status: str, name: str, content: str = "") -> Path:
        path = container / folder / status / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make
