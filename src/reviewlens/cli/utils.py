"""CLI utilities."""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click

from reviewlens.config import LoggingConfig
from reviewlens.core.errors import ConfigError
from reviewlens.core.logging import configure_logging
from reviewlens.git import GitError, ReviewOps


@contextmanager
def engine_errors() -> Iterator[None]:
    """Surface engine errors as click errors with the message verbatim."""
    try:
        yield
    except GitError as e:
        raise click.ClickException(str(e)) from e
    except ConfigError as e:
        raise click.ClickException(e.message) from e


def _is_verbose() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    obj = ctx.find_root().obj
    return bool(obj and obj.get("verbose"))


def apply_logging(config: LoggingConfig, *, verbose: bool = False) -> None:
    """Configure logging from the repository's config; -v forces DEBUG at the root."""
    if verbose:
        config = config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=config)


def open_ops(path: Path) -> ReviewOps:
    """Open the repository containing ``path`` and apply its logging config."""
    with engine_errors():
        ops = ReviewOps(path)
    apply_logging(ops.config.logging, verbose=_is_verbose())
    return ops


def resolve_base(ops: ReviewOps, base: str | None) -> str:
    """Explicit --base, or the repository's suggested default base."""
    if base:
        return base
    with engine_errors():
        return ops.repo_info().default_base


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))
