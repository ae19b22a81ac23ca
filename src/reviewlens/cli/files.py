"""rlens files command - list files changed since the merge base."""

from pathlib import Path

import click

from reviewlens.cli.utils import echo_json, engine_errors, open_ops, resolve_base


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--base", "-b", default=None, help="Base branch (default: suggested base)")
@click.option("--hide-cosmetic", is_flag=True, help="Omit files whose changes are all cosmetic")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def files_command(path: Path, base: str | None, hide_cosmetic: bool, as_json: bool) -> None:
    """List changed files relative to the merge base with BASE.

    PATH is any directory inside the repository (default: current directory).
    """
    ops = open_ops(path)
    base_branch = resolve_base(ops, base)
    with engine_errors():
        files = ops.list_changed_files(base_branch)

    if hide_cosmetic:
        files = [f for f in files if not f.is_cosmetic]

    if as_json:
        echo_json([f.to_dict() for f in files])
        return

    if not files:
        click.echo(f"No changes against {base_branch}")
        return

    for f in files:
        marker = " cosmetic" if f.is_cosmetic else ""
        click.echo(f"{f.status:<10} +{f.additions:<5} -{f.deletions:<5}{marker:<9} {f.path}")
