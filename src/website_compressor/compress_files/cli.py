"""CLI command for compressing files and folders in place."""

import logging
import re
from typing import List, Optional

import typer
from rich.logging import RichHandler

from website_compressor import __version__
from website_compressor.compress_files.main import main
from website_compressor.models.config import Configuration
from website_compressor.utils.cli import EXIT_FAILURE, cli_error_handler, print_usage, stderr_console
from website_compressor.utils.dependencies import check_dependencies

LINE_BREAK_VALUE = re.compile(r"[+-]?[0-9]+")


def _help_callback(ctx: typer.Context, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        print_usage()
        raise typer.Exit()


def _version_callback(ctx: typer.Context, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        typer.echo(f"Website Compressor v{__version__}")
        raise typer.Exit()


def parse_line_break(value: Optional[str]) -> Optional[int]:
    """Parse a base-10 column number, returning None when it is malformed."""
    if value is None:
        return -1
    if not LINE_BREAK_VALUE.fullmatch(value):
        return None
    return int(value, 10)


@cli_error_handler
def compress(
    targets: Optional[List[str]] = typer.Argument(None, metavar="<files or folders>", show_default=False),
    show_help: bool = typer.Option(False, "-h", "--help", callback=_help_callback, is_eager=True),
    show_version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
    charset: Optional[str] = typer.Option(None, "--charset", metavar="<charset>"),
    compress_css: bool = typer.Option(False, "--compress-css"),
    compress_js: bool = typer.Option(False, "--compress-js"),
    disable_optimizations: bool = typer.Option(False, "--disable-optimizations"),
    line_break: Optional[str] = typer.Option(None, "--line-break", metavar="<column>"),
    nomunge: bool = typer.Option(False, "--nomunge"),
    preserve_comments: bool = typer.Option(False, "--preserve-comments"),
    preserve_intertag_spaces: bool = typer.Option(False, "--preserve-intertag-spaces"),
    preserve_line_breaks: bool = typer.Option(False, "--preserve-line-breaks"),
    preserve_multi_spaces: bool = typer.Option(False, "--preserve-multi-spaces"),
    preserve_quotes: bool = typer.Option(False, "--preserve-quotes"),
    preserve_semi: bool = typer.Option(False, "--preserve-semi"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """
    Compress CSS, HTML, JavaScript and XML files in place.

    Folders are walked recursively; files with any other extension are left untouched.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=stderr_console, rich_tracebacks=True, show_time=True)],
        force=True,
    )
    logger = logging.getLogger(__name__)

    line_break_column = parse_line_break(line_break)
    if line_break_column is None or not targets:
        print_usage(err=True)
        raise typer.Exit(code=EXIT_FAILURE)

    config = Configuration(
        charset=charset,
        line_break=line_break_column,
        compress_css=compress_css,
        compress_js=compress_js,
        disable_optimizations=disable_optimizations,
        nomunge=nomunge,
        preserve_comments=preserve_comments,
        preserve_intertag_spaces=preserve_intertag_spaces,
        preserve_line_breaks=preserve_line_breaks,
        preserve_multi_spaces=preserve_multi_spaces,
        preserve_quotes=preserve_quotes,
        preserve_semi=preserve_semi,
    )

    versions = check_dependencies()
    logger.debug(", ".join(f"{name} version: {version}" for name, version in versions.items()))
    logger.debug(f"Using charset {config.charset}")

    main(targets, config)
