"""CLI argument resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..core.models import InvocationConfig

DEFAULT_PROGRAM_NAME = "hbyml"

_VERSION_FLAGS = frozenset({"--version", "-v"})


def usage_line(program_name: str) -> str:
    return (
        f"Usage: {program_name} --template <template.html> "
        "--partials <partials-dir> --data <data.yaml> --output <output.html>"
    )


def _optional_path(value: Optional[str]) -> Optional[Path]:
    # Empty strings count as missing.
    return Path(value) if value else None


def resolve_config(
    template: Optional[str],
    data: Optional[str],
    output: Optional[str] = None,
    partials: Optional[str] = None,
    help: bool = False,
    version: bool = False,
) -> InvocationConfig:
    """Build an InvocationConfig from raw option values."""
    return InvocationConfig(
        template_path=_optional_path(template),
        data_path=_optional_path(data),
        output_path=_optional_path(output),
        partials_dir=_optional_path(partials),
        help=help,
        version=version,
    )


def requests_version(args: list[str]) -> bool:
    """Check raw argument tokens for a version flag.

    Used when the tokens could not be parsed into options.
    """
    return any(arg in _VERSION_FLAGS for arg in args)
