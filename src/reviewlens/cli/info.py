"""rlens info command - show repository branches and default base."""

from pathlib import Path

import click

from reviewlens.cli.utils import echo_json, engine_errors, open_ops


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def info_command(path: Path, as_json: bool) -> None:
    """Show current branch, branches and the suggested base branch.

    PATH is any directory inside the repository (default: current directory).
    """
    ops = open_ops(path)
    with engine_errors():
        info = ops.repo_info()

    if as_json:
        echo_json(info.to_dict())
        return

    click.echo(f"Repository: {info.path or '(bare)'}")
    click.echo(f"Current branch: {info.current_branch}")
    click.echo(f"Default base: {info.default_base}")
    for branch in info.branches:
        marker = "*" if branch.is_current else " "
        kind = " (remote)" if branch.is_remote else ""
        click.echo(f"  {marker} {branch.name}{kind}")
