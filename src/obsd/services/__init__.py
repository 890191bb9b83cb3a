"""Vault operations."""

from .archiver import archive_entity
from .creator import create_entity, resolve_template_name
from .initializer import generate_agents_md, init_vault
from .marker import mark_item, rewrite_status
from .naming import collect_prefixes, generate_unique_prefix, slugify
from .renderer import build_variables, render_template

__all__ = [
    "archive_entity",
    "build_variables",
    "collect_prefixes",
    "create_entity",
    "generate_agents_md",
    "generate_unique_prefix",
    "init_vault",
    "mark_item",
    "render_template",
    "resolve_template_name",
    "rewrite_status",
    "slugify",
]
