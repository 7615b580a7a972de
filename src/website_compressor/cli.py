"""Console script for website_compressor."""

import typer

from website_compressor.compress_files.cli import compress
from website_compressor.utils.cli import UsageCommand

app = typer.Typer(add_completion=False)

app.command(
    "compress",
    cls=UsageCommand,
    context_settings={"help_option_names": []},
)(compress)


if __name__ == "__main__":
    app()
