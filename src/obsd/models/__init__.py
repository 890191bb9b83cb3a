"""Pydantic models and value types."""

from .commands import ArchiveResult, CreateResult, InitResult, MarkOptions, MarkResult, NewOptions
from .entity import ArchiveKind, EntityName, ItemKind, Status
from .vault import EntityTemplate, TemplateFile, VaultConfig

__all__ = [
    "ArchiveKind",
    "ArchiveResult",
    "CreateResult",
    "EntityName",
    "EntityTemplate",
    "InitResult",
    "ItemKind",
    "MarkOptions",
    "MarkResult",
    "NewOptions",
    "Status",
    "TemplateFile",
    "VaultConfig",
]
