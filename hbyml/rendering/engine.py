"""Handlebars rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from pybars import Compiler

from ..core.errors import OutputWriteError, RenderError, TemplateLoadError

logger = logging.getLogger(__name__)

CompiledTemplate = Callable[..., Any]


def load_template(template_path: Path) -> str:
    """Read the main template source.

    Raises:
        TemplateLoadError: If the file cannot be read
    """
    try:
        return template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(f"Cannot read template {template_path}: {e}") from e


def compile_template(source: str, compiler: Optional[Compiler] = None) -> CompiledTemplate:
    """Compile Handlebars source into a callable template.

    Raises:
        RenderError: If the source does not compile
    """
    compiler = compiler or Compiler()
    try:
        return compiler.compile(source)
    except Exception as e:
        raise RenderError(f"Template compilation failed: {e}") from e


def render(source: str, data: Any, partials: Mapping[str, str]) -> str:
    """Render a template against a data tree.

    Args:
        source: Main template source
        data: Value tree the template is evaluated against
        partials: Partial name to source, available to ``{{> name}}``

    Returns:
        Rendered text

    Raises:
        RenderError: If the template or a partial fails to compile or evaluate
    """
    compiler = Compiler()
    compiled_partials = {
        name: compile_template(text, compiler) for name, text in partials.items()
    }
    template = compile_template(source, compiler)

    # An empty YAML document still renders, with nothing to look up.
    context = {} if data is None else data
    try:
        return str(template(context, partials=compiled_partials))
    except Exception as e:
        raise RenderError(str(e)) from e


def emit(text: str, output_path: Optional[Path]) -> Optional[str]:
    """Write rendered text to ``output_path``.

    The file is created or truncated in place, so an existing file keeps its
    permissions and a symlink is written through to its target.

    Returns:
        Confirmation line for the written file, or None when no output path
        was given and the caller should print ``text`` itself

    Raises:
        OutputWriteError: If the file cannot be written
    """
    if output_path is None:
        return None

    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write output {output_path}: {e}") from e
    logger.info(f"Rendered output written to {output_path}")
    return f"Generated HTML file: {output_path}"
