"""Move projects, areas and resources to their archive roots."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..exceptions import EntityExistsError, EntityLookupError, VaultValidationError
from ..models import ArchiveKind, ArchiveResult, VaultConfig

logger = logging.getLogger(__name__)


def archive_roots(config: VaultConfig, kind: ArchiveKind) -> tuple[str, str]:
    """(source root, archive root) for ``kind``."""
    return {
        ArchiveKind.PROJECT: (config.projects_root, config.archive_projects_root),
        ArchiveKind.AREA: (config.areas_root, config.archive_areas_root),
        ArchiveKind.RESOURCE: (config.resources_root, config.archive_resources_root),
    }[kind]


def validate_archive_name(name: str) -> None:
    """Reject names that are not a single entry directly under a root."""
    if not name or name in (".", "..") or "\\" in name or Path(name).name != name:
        raise VaultValidationError(f"Error: Invalid archive name: {name!r}")


def archive_entity(config: VaultConfig, kind: ArchiveKind, name: str) -> ArchiveResult:
    """Move ``<root>/<name>`` to ``<archive root>/<name>``.

    Works for folders and, for resources, single files.

    Raises:
        VaultValidationError: name is empty, a dot entry or a path
        EntityLookupError: source does not exist
        EntityExistsError: destination already exists
    """
    validate_archive_name(name)
    root, archive_root = archive_roots(config, kind)
    source = config.vault_path / root / name
    destination = config.vault_path / archive_root / name

    if not source.exists():
        raise EntityLookupError(f"Folder not found: {source}")

    if destination.exists():
        raise EntityExistsError("Archive entry", destination)

    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.move(str(source), str(destination))

    logger.debug(f"Archived {kind.value}: {source} -> {destination}")
    return ArchiveResult(kind=kind, name=name, source=source, destination=destination)
