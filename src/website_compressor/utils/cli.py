"""Shared CLI error handling and the usage screen."""

import functools
from collections.abc import Callable

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

EXIT_FAILURE = 1
EXIT_INTERRUPT = 130

stderr_console = Console(stderr=True)

USAGE = """\
Usage: website-compressor [options] <files or folders>

<files or folders>          The files are compressed in-place

Global Options:
 --charset <charset>        Read the input files using <charset>
 -h, --help                 Print this screen
 -v, --verbose              Log every file on standard error
 --version                  Print the version and exit

CSS Compression Options:
 --line-break <column>      Insert a line break after the specified column number

HTML Compression Options:
 --compress-css             Enable inline CSS compression
 --compress-js              Enable inline JavaScript compression
 --preserve-comments        Preserve comments
 --preserve-intertag-spaces Preserve intertag spaces
 --preserve-line-breaks     Preserve line breaks
 --preserve-multi-spaces    Preserve multiple spaces
 --preserve-quotes          Preserve unneeded quotes

JavaScript Compression Options:
 --disable-optimizations    Disable all micro optimizations
 --line-break <column>      Insert a line break after the specified column number
 --nomunge                  Minify only, do not obfuscate
 --preserve-semi            Preserve all semicolons

XML Compression Options:
 --preserve-comments        Preserve comments
 --preserve-intertag-spaces Preserve intertag spaces"""

HELP_FLAGS = ("-h", "--help")
VALUE_OPTIONS = ("--charset", "--line-break")


def print_usage(err: bool = False) -> None:
    typer.echo(USAGE, err=err)


def requests_help(args: list[str]) -> bool:
    """Tell whether -h/--help appears as an option, not as an option value or after `--`."""
    expects_value = False
    for arg in args:
        if expects_value:
            expects_value = False
        elif arg == "--":
            return False
        elif arg in HELP_FLAGS:
            return True
        elif arg in VALUE_OPTIONS:
            expects_value = True
    return False


class UsageCommand(TyperCommand):
    """Command that answers every grammar error with the usage screen on stderr and exit code 1.

    A help request still wins over errors anywhere else in the arguments.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        original = list(args)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            if requests_help(original):
                print_usage()
                ctx.exit(0)
            print_usage(err=True)
            ctx.exit(EXIT_FAILURE)


def cli_error_handler(func: Callable) -> Callable:
    """Wrap a CLI command to catch common exceptions with consistent exit codes.

    Module-specific exceptions should be caught inside the wrapped function
    before they bubble up to this handler.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (typer.Exit, SystemExit):
            raise
        except KeyboardInterrupt:
            stderr_console.print("\n[bold yellow]Interrupted by user[/bold yellow]")
            raise typer.Exit(code=EXIT_INTERRUPT)
        except (OSError, ValueError, RuntimeError) as e:
            stderr_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
            raise typer.Exit(code=EXIT_FAILURE)
        except Exception as e:
            stderr_console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(e))}", highlight=False)
            raise typer.Exit(code=EXIT_FAILURE)

    return wrapper
