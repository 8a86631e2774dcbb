"""Main CLI application."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import click
import typer
from typer.core import TyperCommand
from typing_extensions import Annotated

from ..core.errors import HbymlError, RenderError
from ..core.settings import get_settings
from ..core.version import read_version, version_string
from ..data import loader
from ..rendering import engine
from ..rendering.partials import collect_partials
from .parsers import DEFAULT_PROGRAM_NAME, requests_version, resolve_config, usage_line

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="hbyml",
    help="Render YAML data through Handlebars templates.",
    add_completion=False,
)


def _program_name(ctx: click.Context) -> str:
    return ctx.find_root().info_name or DEFAULT_PROGRAM_NAME


def _current_version(program_name: str) -> str:
    settings = get_settings()
    return version_string(
        program_name, read_version(settings.version_file, settings.default_version)
    )


def _exit_with_version(ctx: click.Context) -> NoReturn:
    typer.echo(_current_version(_program_name(ctx)))
    ctx.exit(0)


def _exit_with_usage(ctx: click.Context) -> NoReturn:
    program_name = _program_name(ctx)
    typer.echo(_current_version(program_name), err=True)
    typer.echo("", err=True)
    typer.echo(usage_line(program_name), err=True)
    ctx.exit(1)


class RenderCommand(TyperCommand):
    """Command whose malformed options end in the usage text with exit code 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        raw = list(args)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.debug(f"Unparseable arguments {raw}: {e.format_message()}")
            if requests_version(raw):
                _exit_with_version(ctx)
            _exit_with_usage(ctx)


@app.command(
    cls=RenderCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def render(
    ctx: typer.Context,
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Handlebars template file.", metavar="PATH"),
    ] = None,
    data: Annotated[
        Optional[str],
        typer.Option("--data", "-d", help="YAML data file.", metavar="PATH"),
    ] = None,
    output: Annotated[
        Optional[str],
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: stdout).",
            metavar="PATH",
        ),
    ] = None,
    partials: Annotated[
        Optional[str],
        typer.Option(
            "--partials",
            "-p",
            help="Directory of *.hbs partials, registered by file name.",
            metavar="DIR",
        ),
    ] = None,
    help: Annotated[
        bool,
        typer.Option("--help", "-h", help="Show usage and exit."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Render a Handlebars template with YAML data."""
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=settings.log_format,
    )

    if ctx.args:
        logger.debug(f"Ignoring extra arguments: {ctx.args}")

    config = resolve_config(template, data, output, partials, help, version)
    if config.version:
        _exit_with_version(ctx)
    if config.needs_usage:
        _exit_with_usage(ctx)

    logger.debug(f"Config: {config}")

    try:
        tree = loader.load_data(config.data_path)
        source = engine.load_template(config.template_path)
        partial_set = collect_partials(config.partials_dir, settings.partial_extension)
        rendered = engine.render(source, tree, partial_set)
        confirmation = engine.emit(rendered, config.output_path)
    except RenderError as e:
        typer.echo(f"Error rendering template: {e}", err=True)
        raise typer.Exit(1) from e
    except HbymlError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(rendered if confirmation is None else confirmation)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
