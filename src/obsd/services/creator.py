"""Create vault entities from templates."""

from __future__ import annotations

import logging
import random
from datetime import date as date_type
from pathlib import Path

from ..exceptions import EntityExistsError, TemplateNotFoundError, VaultValidationError
from ..models import CreateResult, EntityTemplate, ItemKind, NewOptions, VaultConfig
from .lookup import PREFIX_LENGTH, find_container, find_prefixed, status_dirs, validate_prefix
from .naming import collect_prefixes, generate_unique_prefix, slugify
from .renderer import build_variables, render_template

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
# Entity types whose prefix is generated when not supplied
PREFIXED_TYPES = ("project", "area")
# Entity types that live inside a project or area selected by --prefix
CONTAINER_TYPES = ("work", "scratch")


def resolve_template_name(entity_type: str, options: NewOptions) -> str:
    """Pick the concrete template for a type and its variant flags."""
    if entity_type == "episode" and options.solo:
        return "solo_episode"
    if entity_type == "scratch" and options.at_root:
        return "scratch_root"
    if entity_type == "resource" and options.prefix:
        return "resource_folder"
    return entity_type


def get_template(config: VaultConfig, name: str) -> EntityTemplate:
    template = config.templates.get(name)
    if template is None:
        raise TemplateNotFoundError(name)
    return template


def create_entity(
    config: VaultConfig,
    entity_type: str,
    title: str | None = None,
    options: NewOptions | None = None,
    rng: random.Random | None = None,
    today: date_type | None = None,
) -> CreateResult:
    """Create a new entity of ``entity_type`` titled ``title``.

    Raises:
        VaultValidationError: missing or malformed option
        EntityLookupError: parent project/area/resource not found
        TemplateNotFoundError: no template for the resolved type
        EntityExistsError: target file or folder already exists
    """
    options = options or NewOptions()
    title = title or DEFAULT_TITLE
    validate_prefix(options.prefix)

    slug = slugify(title)
    prefix = options.prefix
    generated_prefix = None
    folder = None
    area = options.area
    code = None

    if entity_type in CONTAINER_TYPES:
        if not prefix and (entity_type == "work" or not options.at_root):
            raise VaultValidationError(
                f"Error: --prefix required for {entity_type} type\n"
                f'Usage: obsd new {entity_type} "Title" --prefix ab'
            )
        if prefix:
            folder = find_container(config, prefix)
        if entity_type == "work":
            code = _generate_item_code(config.vault_path / folder, ItemKind.WORK, rng)

    elif entity_type == "resource" and prefix:
        existing = find_prefixed(config.resources_dir, prefix)
        if existing:
            return _add_to_resource_folder(config, existing, title, slug, options, today)

    elif entity_type == "post":
        if not area:
            raise VaultValidationError(
                'Error: --area required for post type\nUsage: obsd new post "Title" --area pb'
            )
        folder = find_container(config, area, include_projects=False)
        area = Path(folder).name
        code = _generate_item_code(config.vault_path / folder, ItemKind.POST, rng)

    elif entity_type in PREFIXED_TYPES and not prefix:
        taken = collect_prefixes(config.projects_dir, config.areas_dir)
        prefix = generate_unique_prefix(taken, PREFIX_LENGTH, rng)
        generated_prefix = prefix

    template_name = resolve_template_name(entity_type, options)
    template = get_template(config, template_name)

    variables = build_variables(
        entity_type,
        title,
        slug,
        prefix=prefix,
        area=area,
        deps=options.deps,
        type_tag=options.type_tag,
        content=options.content,
        folder=folder,
        code=code,
        today=today,
    )

    if template.is_single_file:
        path = _write_single_file(config, template, variables)
    else:
        path = _write_folder(config, template, variables)

    logger.debug(f"Created {entity_type} from template {template_name}: {path}")
    return CreateResult(
        entity_type=entity_type,
        title=title,
        path=path,
        template_name=template_name,
        generated_prefix=generated_prefix,
        code=code,
    )


def _generate_item_code(container: Path, kind: ItemKind, rng: random.Random | None) -> str:
    taken = collect_prefixes(*status_dirs(container, kind))
    return generate_unique_prefix(taken, kind.code_length, rng)


def _vault_path(config: VaultConfig, rendered: str) -> Path:
    # An empty {{folder}} renders as a leading slash
    return config.vault_path / rendered.lstrip("/")


def _write_single_file(config: VaultConfig, template: EntityTemplate, variables: dict[str, str]) -> Path:
    path = _vault_path(config, render_template(template.file_path, variables))
    if path.exists():
        raise EntityExistsError("File", path)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_template(template.template or "", variables), encoding="utf-8")
    return path


def _write_folder(config: VaultConfig, template: EntityTemplate, variables: dict[str, str]) -> Path:
    folder = _vault_path(config, render_template(template.folder_pattern, variables))
    if folder.exists():
        raise EntityExistsError("Folder", folder)

    folder.mkdir(parents=True)
    # No rollback: a failure on file N leaves files 1..N-1 on disk
    for file_def in template.files or []:
        path = folder / render_template(file_def.name, variables)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_template(file_def.template, variables), encoding="utf-8")
        logger.debug(f"Wrote {path}")
    return folder


def _add_to_resource_folder(
    config: VaultConfig,
    folder_name: str,
    title: str,
    slug: str,
    options: NewOptions,
    today: date_type | None,
) -> CreateResult:
    """Write a single resource note into an existing ``<prefix>_*`` resource folder."""
    template = get_template(config, "resource")
    path = config.resources_dir / folder_name / f"{slug}.md"
    if path.exists():
        raise EntityExistsError("File", path)

    variables = build_variables(
        "resource",
        title,
        slug,
        prefix=options.prefix,
        area=options.area,
        deps=options.deps,
        type_tag=options.type_tag,
        content=options.content,
        today=today,
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_template(template.template or "", variables), encoding="utf-8")

    logger.debug(f"Added resource to existing folder {folder_name}: {path}")
    return CreateResult(
        entity_type="resource",
        title=title,
        path=path,
        template_name="resource",
        merged=True,
    )
