"""Hbyml - Handlebars renderer for YAML data.

Reads a YAML document, renders it through a Handlebars template (with optional
partials) and writes the result to a file or stdout.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
