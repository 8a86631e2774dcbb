"""Partial template discovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..core.errors import PartialLoadError

logger = logging.getLogger(__name__)


def collect_partials(
    partials_dir: Optional[Path], extension: str = ".hbs"
) -> dict[str, str]:
    """Collect partial sources from the direct entries of a directory.

    Each regular file ending in ``extension`` is registered under its file
    name without the extension. Anything else is skipped. A missing path or
    a path that is not a directory yields no partials.

    Args:
        partials_dir: Directory to scan, or None
        extension: File suffix that marks a partial

    Returns:
        Mapping of partial name to template source
    """
    partials: dict[str, str] = {}
    if partials_dir is None:
        return partials
    if not partials_dir.is_dir():
        logger.debug(f"Partials directory not found, skipping: {partials_dir}")
        return partials

    for entry in sorted(partials_dir.iterdir()):
        if not entry.is_file() or not entry.name.endswith(extension):
            continue
        name = entry.name[: len(entry.name) - len(extension)]
        try:
            partials[name] = entry.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PartialLoadError(f"Cannot read partial {entry}: {e}") from e
        logger.debug(f"Registered partial {name!r} from {entry}")

    logger.info(f"Loaded {len(partials)} partial(s) from {partials_dir}")
    return partials
