"""Slugs and short entity prefixes."""

from __future__ import annotations

import logging
import random
import re
import string
from pathlib import Path

logger = logging.getLogger(__name__)

NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated, filesystem-safe form of ``text``."""
    slug = NON_ALNUM.sub("-", text.lower().strip())
    return slug.strip("-")


def collect_prefixes(*dirs: Path) -> set[str]:
    """Prefixes (text before the first underscore) of every entry in ``dirs``.

    Missing directories are skipped; names without an underscore are ignored.
    """
    prefixes: set[str] = set()
    for directory in dirs:
        if not directory.is_dir():
            continue
        for entry in directory.iterdir():
            if "_" in entry.name:
                prefixes.add(entry.name.split("_", 1)[0])
    return prefixes


def generate_unique_prefix(
    existing: set[str],
    length: int = 2,
    rng: random.Random | None = None,
) -> str:
    """Sample lowercase letters until the result is not in ``existing``.

    There is no retry cap: with every combination taken this never returns.
    """
    rng = rng or random.Random()
    while True:
        prefix = "".join(rng.choice(string.ascii_lowercase) for _ in range(length))
        if prefix not in existing:
            logger.debug(f"Generated prefix {prefix} ({len(existing)} taken)")
            return prefix
