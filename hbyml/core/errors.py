"""Error taxonomy for a single render run."""

from __future__ import annotations


class HbymlError(Exception):
    """Base class for fatal errors raised while rendering."""


class DataLoadError(HbymlError):
    """Raised when the YAML data file cannot be read or parsed."""


class TemplateLoadError(HbymlError):
    """Raised when the main template file cannot be read."""


class PartialLoadError(HbymlError):
    """Raised when a partial file cannot be read."""


class RenderError(HbymlError):
    """Raised when a template fails to compile or evaluate."""


class OutputWriteError(HbymlError):
    """Raised when the rendered output cannot be written."""
