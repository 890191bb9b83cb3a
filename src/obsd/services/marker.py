"""Move work items and posts between status folders."""

from __future__ import annotations

import logging
import re

from ..exceptions import EntityExistsError, VaultValidationError
from ..models import ItemKind, MarkOptions, MarkResult, Status, VaultConfig
from .lookup import find_container, find_item, status_dirs, validate_prefix

logger = logging.getLogger(__name__)

# Leading "---" block; status markers are only rewritten inside it
FRONTMATTER = re.compile(r"\A(?P<open>---[ \t]*\r?\n)(?P<body>.*?\r?\n)(?P<close>---[ \t]*(?:\r?\n|\Z))", re.DOTALL)
# "- status/backlog" inside a frontmatter tags list
STATUS_TAG_LINE = re.compile(r"^(?P<indent>[ \t]*-[ \t]*)status/[\w-]+[ \t]*$", re.MULTILINE)
STATUS_TAG_LINE_WITH_EOL = re.compile(r"^[ \t]*-[ \t]*status/[\w-]+[ \t]*(?:\r?\n|$)", re.MULTILINE)
# "status: Backlog" frontmatter field (work items)
STATUS_FIELD = re.compile(r"^status:[ \t]*.*$", re.MULTILINE)


def rewrite_status(content: str, kind: ItemKind, status: Status) -> str:
    """Rewrite the status markers in the frontmatter of an item for ``status``.

    The ``- status/<name>`` tag line is updated, or dropped when the item is
    done. Work items also carry a ``status: <Name>`` field. The note body and
    notes without frontmatter are left untouched.
    """
    match = FRONTMATTER.match(content)
    if not match:
        return content

    frontmatter = match.group("body")
    if status is Status.DONE:
        frontmatter = STATUS_TAG_LINE_WITH_EOL.sub("", frontmatter)
    else:
        frontmatter = STATUS_TAG_LINE.sub(lambda m: f"{m.group('indent')}status/{status.value}", frontmatter)

    if kind is ItemKind.WORK:
        frontmatter = STATUS_FIELD.sub(f"status: {status.label}", frontmatter, count=1)
    return match.group("open") + frontmatter + match.group("close") + content[match.end():]


def validate_mark_options(options: MarkOptions) -> None:
    validate_prefix(options.prefix)
    length = options.kind.code_length
    if len(options.item) != length or not options.item.isalpha() or not options.item.islower():
        raise VaultValidationError(
            f"Error: --item must be exactly {length} lowercase letters for {options.kind.value} items"
        )


def mark_item(config: VaultConfig, options: MarkOptions) -> MarkResult:
    """Move an item to the ``options.status`` folder and update its markers.

    This is read, write, then delete: a crash in between can leave both
    copies on disk.

    Raises:
        VaultValidationError: malformed prefix or item code
        EntityLookupError: parent or item not found
        EntityExistsError: a different file already sits at the destination
    """
    validate_mark_options(options)
    kind = options.kind

    parent = find_container(config, options.prefix, include_projects=kind is ItemKind.WORK)
    container = config.vault_path / parent
    source, current, entity = find_item(container, kind, options.item)

    target_dir = status_dirs(container, kind)[list(Status).index(options.status)]
    target_name = entity.bare_name if options.status is Status.DONE else entity.name
    destination = target_dir / target_name

    if destination != source and destination.exists():
        raise EntityExistsError("File", destination)

    content = source.read_text(encoding="utf-8")
    updated = rewrite_status(content, kind, options.status)

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(updated, encoding="utf-8")
    if destination != source:
        source.unlink()

    logger.debug(f"Marked {kind.value} {options.item}: {current.value} -> {options.status.value}")
    return MarkResult(
        kind=kind,
        code=options.item,
        status=options.status,
        source=source,
        destination=destination,
    )
