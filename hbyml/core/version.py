"""Version string lookup from the sidecar version file."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_version(version_file: Path, default: str) -> str:
    """Return the version stored in ``version_file``, or ``default``.

    A missing, unreadable or blank file is not an error.
    """
    try:
        value = version_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Version file {version_file} unavailable: {e}")
        return default
    return value or default


def version_string(program_name: str, version: str) -> str:
    return f"{program_name} v{version}"
