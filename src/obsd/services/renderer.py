"""Template rendering.

Templates use ``{{key}}`` and ``{{key|default}}`` placeholders. A key present
in the variable map always wins, even when its value is empty; otherwise the
default is used, otherwise the placeholder renders as an empty string.
``{{cursor}}`` only marks an editor cursor position and is always removed.
"""

from __future__ import annotations

import re
from datetime import date as date_type

VAR_PATTERN = re.compile(r"\{\{([^}]+)\}\}")
CURSOR_MARKER = "{{cursor}}"

DEFAULT_AREA = "pb_personal_blog"
DEFAULT_DEPENDENCIES = "none"
DEFAULT_TYPE = "task"


def render_template(tmpl: str, variables: dict[str, str]) -> str:
    """Substitute every placeholder in ``tmpl``."""

    def replace_var(match: re.Match) -> str:
        parts = [part.strip() for part in match.group(1).split("|")]
        key = parts[0]
        default = parts[1] if len(parts) > 1 else None
        if key in variables and variables[key] is not None:
            return variables[key]
        return default if default is not None else ""

    return VAR_PATTERN.sub(replace_var, tmpl).replace(CURSOR_MARKER, "")


def build_variables(
    entity_type: str,
    title: str,
    slug: str,
    prefix: str | None = None,
    area: str | None = None,
    deps: str | None = None,
    type_tag: str | None = None,
    content: str | None = None,
    folder: str | None = None,
    code: str | None = None,
    today: date_type | None = None,
) -> dict[str, str]:
    """Assemble the variables available to every template."""
    today = today or date_type.today()
    return {
        "title": title,
        "slug": slug,
        "date": today.isoformat(),
        "status": "Planned" if entity_type == "project" else "Active",
        "area": area or DEFAULT_AREA,
        "dependencies": _format_deps(deps) or DEFAULT_DEPENDENCIES,
        "type": type_tag or DEFAULT_TYPE,
        "content": content or "",
        "prefix": prefix or "",
        "folder": folder or "",
        "code": code or "",
    }


def _format_deps(deps: str | None) -> str:
    """Normalize a comma list: ``"a,b , c"`` -> ``"a, b, c"``."""
    if not deps:
        return ""
    return ", ".join(d.strip() for d in deps.split(",") if d.strip())
