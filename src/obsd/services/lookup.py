"""Find vault entities by prefix."""

from __future__ import annotations

from pathlib import Path

from ..exceptions import EntityLookupError, VaultValidationError
from ..models import EntityName, ItemKind, Status, VaultConfig

PREFIX_LENGTH = 2


def validate_prefix(prefix: str | None) -> None:
    """Reject a project/area prefix that is not exactly two characters."""
    if prefix is not None and len(prefix) != PREFIX_LENGTH:
        raise VaultValidationError(f"Error: --prefix must be exactly {PREFIX_LENGTH} characters")


def prefixed_entries(directory: Path, prefix: str) -> list[Path]:
    """Entries of ``directory`` starting with ``<prefix>_``, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.name.startswith(f"{prefix}_")),
        key=lambda p: p.name,
    )


def find_prefixed(directory: Path, prefix: str) -> str | None:
    """Name of the first folder in ``directory`` starting with ``<prefix>_``."""
    for path in prefixed_entries(directory, prefix):
        if path.is_dir():
            return path.name
    return None


def find_container(config: VaultConfig, prefix: str, include_projects: bool = True) -> str:
    """Vault-relative path of the project or area with ``prefix``.

    Projects are searched before areas. ``include_projects=False`` restricts
    the search to areas (posts only live in areas).

    Raises:
        EntityLookupError: if nothing matches
    """
    roots = [config.projects_root, config.areas_root] if include_projects else [config.areas_root]
    for root in roots:
        name = find_prefixed(config.vault_path / root, prefix)
        if name:
            return f"{root}/{name}"

    if include_projects:
        raise EntityLookupError(f"Error: No project or area found with prefix '{prefix}'")
    raise EntityLookupError(f"Error: No area found with prefix '{prefix}'")


def status_dirs(container: Path, kind: ItemKind) -> list[Path]:
    """The four status folders of ``container`` for ``kind``, in workflow order."""
    return [container / kind.folder / status.value for status in Status]


def find_item(container: Path, kind: ItemKind, code: str) -> tuple[Path, Status, EntityName]:
    """Locate the item file ``<code>_<slug>`` in any status folder of ``container``.

    Folders and names without a slug are skipped.

    Raises:
        EntityLookupError: if no status folder holds a matching file
    """
    for status, folder in zip(Status, status_dirs(container, kind)):
        for path in prefixed_entries(folder, code):
            entity = EntityName.match(path.name)
            if entity and path.is_file():
                return path, status, entity

    raise EntityLookupError(f"Error: No {kind.value} item '{code}' found in {container / kind.folder}")
