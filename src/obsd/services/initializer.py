"""Create the vault folder structure and the AGENTS.md command reference."""

from __future__ import annotations

import logging
from pathlib import Path

from ..models import InitResult, VaultConfig

logger = logging.getLogger(__name__)

JOURNAL_DIRS = ["04_journal", "04_journal/daily", "04_journal/weeklies", "04_journal/experiments"]

AGENTS_FILENAME = "AGENTS.md"
AGENTS_MARKER = "## obsd Commands"


def vault_dirs(config: VaultConfig) -> list[str]:
    """Configured roots plus journal folders, deduplicated, in creation order."""
    dirs: list[str] = []
    for directory in [*config.root_dirs(), *JOURNAL_DIRS]:
        if directory and directory not in dirs:
            dirs.append(directory)
    return dirs


def init_vault(config: VaultConfig) -> InitResult:
    """Create missing vault folders and create or update AGENTS.md."""
    created: list[str] = []
    for directory in vault_dirs(config):
        path = config.vault_path / directory
        if not path.exists():
            path.mkdir(parents=True)
            logger.debug(f"Created {path}")
            created.append(directory)

    agents_path = config.vault_path / AGENTS_FILENAME
    action = write_agents_md(agents_path, generate_agents_md(config))

    return InitResult(
        vault_path=config.vault_path,
        created_dirs=created,
        agents_path=agents_path,
        agents_action=action,
    )


def write_agents_md(path: Path, section: str) -> str:
    """Insert ``section`` into ``path``, keeping user text before the marker.

    Returns:
        'created', 'updated' or 'appended'
    """
    if not path.exists():
        path.write_text(section, encoding="utf-8")
        return "created"

    existing = path.read_text(encoding="utf-8")
    if AGENTS_MARKER in existing:
        before = existing.split(AGENTS_MARKER, 1)[0]
        path.write_text(before + section, encoding="utf-8")
        return "updated"

    path.write_text(existing + "\n" + section, encoding="utf-8")
    return "appended"


def generate_agents_md(config: VaultConfig) -> str:
    """Command reference for agents working in the vault.

    Folder names come from the live configuration so the reference follows
    the configured layout.
    """
    projects = config.projects_root.rstrip("/")
    areas = config.areas_root.rstrip("/")
    resources = config.resources_root.rstrip("/")
    inbox = config.inbox_root.rstrip("/")
    archive_projects = config.archive_projects_root.rstrip("/")
    archive_areas = config.archive_areas_root.rstrip("/")
    archive_resources = config.archive_resources_root.rstrip("/")
    templates = ", ".join(sorted(config.templates)) or "none"

    return f"""{AGENTS_MARKER}

Use `obsd` to create and manage notes in the vault using the PARA method (Projects, Areas, Resources, Archives).

### Quick Reference

```bash
obsd new project "Title"                    # Creates {projects}/<prefix>_<slug>/
obsd new area "Title"                       # Creates {areas}/<prefix>_<slug>/
obsd new post "Title" --area <prefix>       # Creates <area>/posts/backlog/<code>_<slug>.md
obsd new resource "Title"                   # Creates {resources}/<slug>.md
obsd new resource "Title" --prefix <xx>     # Adds to {resources}/<xx>_*/ or creates that folder
obsd new inbox "Title" --content "Text"     # Creates {inbox}/<date>-<slug>.md
obsd new scratch "Title" --prefix <xx>      # Creates <xx>_folder/notes/<date>-<slug>.md
obsd new scratch "Title" --prefix <xx> --at-root  # Creates at folder root
obsd new work "Title" --prefix <xx>         # Creates <xx>_folder/work/backlog/<code>_<slug>.md
obsd new episode "Guest Name"               # Creates an interview episode
obsd new episode "Topic" --solo             # Creates a solo episode

obsd archive project <prefix>_<slug>        # Move to {archive_projects}/
obsd archive area <prefix>_<slug>           # Move to {archive_areas}/
obsd archive resource <name>                # Move to {archive_resources}/

obsd mark work --prefix <xx> --item <yy> --status active   # backlog|active|review|done
obsd mark post --prefix <xx> --item <abc> --status done     # done strips the item code
```

### Options

- `--prefix <xx>`: 2-character prefix (auto-generated for project/area, use for scratch/resource/work to target specific folder)
- `--area <name>`: Area prefix for posts
- `--solo`: For episode type, creates a solo episode instead of interview
- `--at-root`: For scratch type, creates file at folder root (not in notes/)

Configured templates: {templates}
"""
