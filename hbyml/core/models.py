"""Domain models for a single invocation."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InvocationConfig(BaseModel):
    """Resolved command-line options for one run."""

    model_config = ConfigDict(frozen=True)

    template_path: Optional[Path] = Field(default=None, description="Main template file")
    data_path: Optional[Path] = Field(default=None, description="YAML data file")
    output_path: Optional[Path] = Field(
        default=None, description="Output file (stdout when unset)"
    )
    partials_dir: Optional[Path] = Field(
        default=None, description="Directory holding partial templates"
    )
    help: bool = Field(default=False, description="Help requested")
    version: bool = Field(default=False, description="Version requested")

    @property
    def needs_usage(self) -> bool:
        """True when help was requested or a required path is missing."""
        return self.help or self.template_path is None or self.data_path is None
