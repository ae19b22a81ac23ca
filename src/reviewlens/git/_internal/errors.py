"""Centralized error mapping for pygit2 and filesystem exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

import pygit2

from reviewlens.git.errors import GitError, ReadFailureError


class ErrorMapper:
    """Maps pygit2 and OS exceptions to domain errors."""

    @staticmethod
    @contextmanager
    def guard(operation: str) -> Iterator[None]:
        """Context manager for consistent exception translation."""
        try:
            yield
        except GitError:
            raise
        except pygit2.GitError as e:
            raise ReadFailureError(operation, str(e)) from e
        except (KeyError, ValueError) as e:
            # pygit2 lookups signal missing objects/refs with KeyError or ValueError
            raise ReadFailureError(operation, str(e) or type(e).__name__) from e
        except OSError as e:
            raise ReadFailureError(operation, e.strerror or str(e)) from e


def git_operation(operation: str) -> AbstractContextManager[None]:
    """Shorthand for ``ErrorMapper.guard``."""
    return ErrorMapper.guard(operation)
