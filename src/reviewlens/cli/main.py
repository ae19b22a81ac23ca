"""ReviewLens CLI - rlens command."""

import click

from reviewlens.cli.diff import diff_command
from reviewlens.cli.files import files_command
from reviewlens.cli.info import info_command
from reviewlens.cli.open import open_command
from reviewlens.core.logging import configure_logging, set_request_id


@click.group()
@click.version_option(version="0.1.0", prog_name="rlens")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """ReviewLens - review a branch's changes with cosmetic noise flagged."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")
    set_request_id()


cli.add_command(info_command, name="info")
cli.add_command(files_command, name="files")
cli.add_command(diff_command, name="diff")
cli.add_command(open_command, name="open")


if __name__ == "__main__":
    cli()
