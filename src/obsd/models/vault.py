"""Pydantic models for the vault configuration document."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class TemplateFile(BaseModel):
    """One file inside a multi-file template."""

    name: str = Field(..., description="File path relative to the rendered folder")
    template: str = Field(default="", description="Body pattern")

    class Config:
        frozen = True


class EntityTemplate(BaseModel):
    """A named template, either single-file or multi-file.

    Single-file templates set ``filePath`` and ``template``; multi-file
    templates set ``folderPattern`` and ``files``.
    """

    file_path: str | None = Field(default=None, alias="filePath")
    template: str | None = None
    folder_pattern: str | None = Field(default=None, alias="folderPattern")
    files: list[TemplateFile] | None = None

    class Config:
        frozen = True
        populate_by_name = True

    @model_validator(mode="after")
    def check_template_shape(self) -> EntityTemplate:
        single = self.file_path is not None
        multi = self.folder_pattern is not None
        if single and multi:
            raise ValueError("template cannot set both filePath and folderPattern")
        if not single and not multi:
            raise ValueError("template must set either filePath or folderPattern")
        if single and self.files:
            raise ValueError("single-file template cannot list files")
        if multi and self.template is not None:
            raise ValueError("multi-file template takes its bodies from files")
        return self

    @property
    def is_single_file(self) -> bool:
        return self.file_path is not None


class VaultConfig(BaseModel):
    """Vault layout and templates, loaded once per invocation."""

    vault_path: Path = Field(..., alias="vaultPath")
    projects_root: str = Field(..., alias="projectsRoot")
    areas_root: str = Field(..., alias="areasRoot")
    resources_root: str = Field(..., alias="resourcesRoot")
    inbox_root: str = Field(default="05_inbox", alias="inboxRoot")
    archive_projects_root: str = Field(..., alias="archiveProjectsRoot")
    archive_areas_root: str = Field(..., alias="archiveAreasRoot")
    archive_resources_root: str = Field(..., alias="archiveResourcesRoot")
    templates: dict[str, EntityTemplate] = Field(default_factory=dict)

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("vault_path", mode="before")
    @classmethod
    def expand_vault_path(cls, value: str | Path) -> Path:
        return Path(value).expanduser()

    @property
    def projects_dir(self) -> Path:
        return self.vault_path / self.projects_root

    @property
    def areas_dir(self) -> Path:
        return self.vault_path / self.areas_root

    @property
    def resources_dir(self) -> Path:
        return self.vault_path / self.resources_root

    def root_dirs(self) -> list[str]:
        """All configured roots, in the order ``init`` creates them."""
        return [
            self.projects_root,
            self.areas_root,
            self.resources_root,
            self.inbox_root,
            self.archive_projects_root,
            self.archive_areas_root,
            self.archive_resources_root,
        ]
