"""Vault entity naming and workflow status types."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..exceptions import VaultValidationError

# <prefix>_<slug>[.ext]
ENTITY_NAME_PATTERN = re.compile(r"^(?P<prefix>[a-z]+)_(?P<slug>[^/\\]+?)(?P<suffix>\.[A-Za-z0-9]+)?$")


class Status(str, Enum):
    """Workflow status folders for work items and posts, in order."""

    BACKLOG = "backlog"
    ACTIVE = "active"
    REVIEW = "review"
    DONE = "done"

    @classmethod
    def parse(cls, value: str) -> Status:
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Invalid status: {value}. Valid statuses: {valid}") from None

    @property
    def label(self) -> str:
        """Capitalized form used in ``status:`` fields."""
        return self.value.capitalize()


class ItemKind(str, Enum):
    """Entities that live in status folders."""

    WORK = "work"
    POST = "post"

    @property
    def folder(self) -> str:
        """Sub-folder of the parent container holding the status folders."""
        return {ItemKind.WORK: "work", ItemKind.POST: "posts"}[self]

    @property
    def code_length(self) -> int:
        return {ItemKind.WORK: 2, ItemKind.POST: 3}[self]


class ArchiveKind(str, Enum):
    """Entities that can be moved to the archive roots."""

    PROJECT = "project"
    AREA = "area"
    RESOURCE = "resource"


@dataclass(frozen=True)
class EntityName:
    """A ``<prefix>_<slug>`` folder or file name.

    Use ``parse`` when the name must follow the convention and ``match`` when
    scanning listings that may hold arbitrary names.
    """

    prefix: str
    slug: str
    suffix: str = ""

    @classmethod
    def match(cls, name: str) -> EntityName | None:
        m = ENTITY_NAME_PATTERN.match(name)
        if not m:
            return None
        return cls(prefix=m.group("prefix"), slug=m.group("slug"), suffix=m.group("suffix") or "")

    @classmethod
    def parse(cls, name: str) -> EntityName:
        entity = cls.match(name)
        if entity is None:
            raise VaultValidationError(f"Not a <prefix>_<slug> name: {name!r}")
        return entity

    @property
    def name(self) -> str:
        return f"{self.prefix}_{self.slug}{self.suffix}"

    @property
    def bare_name(self) -> str:
        """Name with the prefix stripped (``xy_task.md`` -> ``task.md``)."""
        return f"{self.slug}{self.suffix}"

    def __str__(self) -> str:
        return self.name
