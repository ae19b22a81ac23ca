"""rlens open command - open a file with the default application."""

from pathlib import Path

import click

from reviewlens.cli.utils import engine_errors, open_ops


@click.command()
@click.argument("file_path")
@click.option(
    "--repo",
    "repo_path",
    default=".",
    type=click.Path(exists=True, path_type=Path),
    help="Directory inside the repository (default: current directory)",
)
def open_command(file_path: str, repo_path: Path) -> None:
    """Open FILE_PATH from the working directory in its default application."""
    ops = open_ops(repo_path)
    with engine_errors():
        ops.open_in_editor(file_path)
