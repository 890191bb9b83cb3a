"""CLI for managing notes in a PARA vault."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import find_config_path, get_settings, load_config
from .exceptions import VaultError, VaultValidationError
from .models import ArchiveKind, ItemKind, MarkOptions, NewOptions, Status, VaultConfig
from .services import archive_entity, create_entity, init_vault, mark_item

app = typer.Typer(help="Manage notes in your Obsidian vault using PARA method")
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

logger = logging.getLogger(__name__)


def _fail(message: str | Exception) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    err_console.print(str(message), markup=False)
    raise typer.Exit(1)


def _load() -> VaultConfig:
    try:
        return load_config()
    except VaultError as e:
        _fail(e)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"obsd {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Manage notes in your Obsidian vault using PARA method."""
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(message)s")


@app.command()
def init():
    """Initialize vault folders."""
    config = _load()
    result = init_vault(config)

    for directory in result.created_dirs:
        console.print(f"[green]✓[/green] Created {escape(directory)}")

    if not result.created_dirs:
        console.print("All directories already exist.")
    else:
        console.print(f"\n[green]✓[/green] Vault initialized with {len(result.created_dirs)} new directories")
        console.print(f"Vault location: {escape(str(result.vault_path))}")

    console.print(f"[green]✓[/green] Created/updated {result.agents_path.name}")


@app.command()
def new(
    entity_type: str = typer.Argument(..., metavar="TYPE", help="project, area, post, resource, inbox, scratch, work, episode"),
    title: str = typer.Argument(None, help="Title (defaults to 'Untitled')"),
    prefix: str = typer.Option(None, "--prefix", help="Two-character prefix for project/area/scratch/resource/work"),
    area: str = typer.Option(None, "--area", help="Area prefix for posts (e.g., pb)"),
    deps: str = typer.Option(None, "--deps", help="Dependencies for project (comma-separated)"),
    type_tag: str = typer.Option(None, "--type", help="Type for inbox (task, link, idea, etc.)"),
    content: str = typer.Option(None, "--content", help="Content for inbox item"),
    solo: bool = typer.Option(False, "--solo", help="For episode type, creates solo episode instead of interview"),
    at_root: bool = typer.Option(False, "--at-root", help="For scratch type, creates file at folder root (not in notes/)"),
):
    """Create new entity (title defaults to 'Untitled')."""
    config = _load()
    options = NewOptions(
        prefix=prefix,
        area=area,
        deps=deps,
        type_tag=type_tag,
        content=content,
        solo=solo,
        at_root=at_root,
    )

    try:
        result = create_entity(config, entity_type, title, options)
    except VaultError as e:
        _fail(e)

    if result.generated_prefix:
        console.print(f"Generated prefix: {result.generated_prefix}")
    console.print(f"[green]✓[/green] Created {escape(result.entity_type)}: {escape(result.title)}")
    console.print(f"  {escape(str(result.path))}")


@app.command()
def archive(
    kind: str = typer.Argument(..., metavar="TYPE", help="project, area or resource"),
    name: str = typer.Argument(..., help="Folder or file name, e.g. ab_my-project"),
):
    """Archive entity folder."""
    try:
        archive_kind = ArchiveKind(kind)
    except ValueError:
        _fail(f"Invalid type: {kind}\nValid types: {', '.join(k.value for k in ArchiveKind)}")

    config = _load()
    try:
        result = archive_entity(config, archive_kind, name)
    except VaultError as e:
        _fail(e)

    console.print(f"[green]✓[/green] Archived {result.kind.value}: {escape(result.name)}")
    console.print(f"  {escape(str(result.destination))}")


@app.command()
def mark(
    kind: str = typer.Argument(..., metavar="TYPE", help="work or post"),
    prefix: str = typer.Option(None, "--prefix", help="Prefix of the parent project or area"),
    item: str = typer.Option(None, "--item", help="Item code (2 letters for work, 3 for posts)"),
    status: str = typer.Option(None, "--status", help="backlog, active, review or done"),
):
    """Move a work item or post to another status folder."""
    try:
        item_kind = ItemKind(kind)
    except ValueError:
        _fail(f"Invalid type: {kind}\nValid types: {', '.join(k.value for k in ItemKind)}")

    try:
        if not prefix or not item or not status:
            raise VaultValidationError(
                "Error: --prefix, --item and --status are required\n"
                f"Usage: obsd mark {item_kind.value} --prefix ab --item xy --status active"
            )
        try:
            target = Status.parse(status)
        except ValueError as e:
            raise VaultValidationError(f"Error: {e}") from e

        config = _load()
        result = mark_item(config, MarkOptions(kind=item_kind, prefix=prefix, item=item, status=target))
    except VaultError as e:
        _fail(e)

    console.print(f"[green]✓[/green] Marked {result.kind.value} {result.code} as {result.status.value}")
    console.print(f"  {escape(str(result.destination))}")


@app.command()
def config():
    """Show current configuration."""
    try:
        path = find_config_path()
    except VaultError as e:
        _fail(e)
    vault = _load()

    table = Table(title="Configuration", show_header=False)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    table.add_row("Config file", escape(str(path)))
    table.add_row("Vault path", escape(str(vault.vault_path)))
    table.add_row("Projects", escape(vault.projects_root))
    table.add_row("Areas", escape(vault.areas_root))
    table.add_row("Resources", escape(vault.resources_root))
    table.add_row("Inbox", escape(vault.inbox_root))
    table.add_row("Archive projects", escape(vault.archive_projects_root))
    table.add_row("Archive areas", escape(vault.archive_areas_root))
    table.add_row("Archive resources", escape(vault.archive_resources_root))
    console.print(table, soft_wrap=False)

    console.print(f"\n[bold]Templates ({len(vault.templates)})[/bold]")
    for name in sorted(vault.templates):
        console.print(f"  - {escape(name)}")
    if not vault.templates:
        console.print("  [dim]none[/dim]")


if __name__ == "__main__":
    app()
