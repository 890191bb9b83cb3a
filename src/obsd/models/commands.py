"""Pydantic models for command options and results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .entity import ArchiveKind, ItemKind, Status


class NewOptions(BaseModel):
    """Options accepted by ``obsd new``."""

    prefix: str | None = Field(default=None, description="Two-character prefix")
    area: str | None = Field(default=None, description="Area prefix for posts")
    deps: str | None = Field(default=None, description="Comma-separated dependencies")
    type_tag: str | None = Field(default=None, description="Free-form type tag (inbox)")
    content: str | None = Field(default=None, description="Free-form body content")
    solo: bool = Field(default=False, description="Solo episode instead of interview")
    at_root: bool = Field(default=False, description="Scratch note at folder root")


class MarkOptions(BaseModel):
    """Options accepted by ``obsd mark``."""

    kind: ItemKind
    prefix: str = Field(..., description="Parent project/area prefix")
    item: str = Field(..., description="Item code (2 letters for work, 3 for posts)")
    status: Status


class CreateResult(BaseModel):
    """Outcome of ``obsd new``."""

    entity_type: str
    title: str
    path: Path
    template_name: str
    generated_prefix: str | None = None
    code: str | None = None
    merged: bool = Field(default=False, description="File added to an existing resource folder")


class ArchiveResult(BaseModel):
    """Outcome of ``obsd archive``."""

    kind: ArchiveKind
    name: str
    source: Path
    destination: Path


class MarkResult(BaseModel):
    """Outcome of ``obsd mark``."""

    kind: ItemKind
    code: str
    status: Status
    source: Path
    destination: Path


class InitResult(BaseModel):
    """Outcome of ``obsd init``."""

    vault_path: Path
    created_dirs: list[str] = Field(default_factory=list)
    agents_path: Path
    agents_action: str = Field(..., description="'created', 'updated' or 'appended'")
