"""YAML data loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import DataLoadError

logger = logging.getLogger(__name__)


def load_data(data_path: Path) -> Any:
    """Load a YAML document into a plain Python value tree.

    Args:
        data_path: Path to the YAML file

    Returns:
        Parsed document (mapping, sequence, scalar or None when empty)

    Raises:
        DataLoadError: If the file cannot be read or is not valid YAML
    """
    logger.debug(f"Loading data: {data_path}")

    try:
        text = data_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Cannot read data file {data_path}: {e}") from e

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DataLoadError(f"Invalid YAML in {data_path}: {e}") from e
