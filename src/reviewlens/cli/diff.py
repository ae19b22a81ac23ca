"""rlens diff command - show one file's hunks with cosmetic annotations."""

from pathlib import Path

import click

from reviewlens.cli.utils import echo_json, engine_errors, open_ops, resolve_base

_PREFIX = {"add": "+", "delete": "-", "context": " "}


@click.command()
@click.argument("file_path")
@click.option(
    "--repo",
    "repo_path",
    default=".",
    type=click.Path(exists=True, path_type=Path),
    help="Directory inside the repository (default: current directory)",
)
@click.option("--base", "-b", default=None, help="Base branch (default: suggested base)")
@click.option("--hide-cosmetic", is_flag=True, help="Omit cosmetic hunks")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def diff_command(
    file_path: str, repo_path: Path, base: str | None, hide_cosmetic: bool, as_json: bool
) -> None:
    """Show the diff of FILE_PATH against the merge base with BASE."""
    ops = open_ops(repo_path)
    base_branch = resolve_base(ops, base)
    with engine_errors():
        file_diff = ops.get_file_diff(file_path, base_branch)

    if as_json:
        echo_json(file_diff.to_dict())
        return

    if file_diff.is_binary:
        click.echo(f"Binary file {file_diff.path} differs")
        return
    if not file_diff.hunks:
        click.echo(f"No changes in {file_diff.path}")
        return

    suffix = " (cosmetic)" if file_diff.is_cosmetic else ""
    click.echo(f"--- {file_diff.path}{suffix}")
    for hunk in file_diff.hunks:
        if hide_cosmetic and hunk.is_cosmetic:
            continue
        note = " (cosmetic)" if hunk.is_cosmetic else ""
        click.echo(f"{hunk.header}{note}")
        for line in hunk.lines:
            text = line.content.rstrip("\n")
            click.echo(f"{_PREFIX[line.kind]}{text}")
