"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (REVIEWLENS__SECTION__KEY)
3. Repo YAML (<repo>/.reviewlens/config.yaml)
4. Global YAML (~/.config/reviewlens/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    REVIEWLENS__<SECTION>__<KEY>=<VALUE>

Examples:
    REVIEWLENS__LOGGING__LEVEL=DEBUG
    REVIEWLENS__DIFF__CONTEXT_LINES=5
    REVIEWLENS__DIFF__REMOTE_NAME=upstream
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        REVIEWLENS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO logs each query, DEBUG every diff source decision.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DiffConfig(BaseModel):
    """Diff computation settings.

    Env vars:
        REVIEWLENS__DIFF__CONTEXT_LINES: Context lines around each hunk
        REVIEWLENS__DIFF__BINARY_SNIFF_BYTES: Bytes scanned for NUL in untracked files
        REVIEWLENS__DIFF__REMOTE_NAME: Remote used when the base branch is not local
    """

    context_lines: int = Field(
        default=3,
        description="Unchanged lines shown around each hunk.",
    )
    binary_sniff_bytes: int = Field(
        default=8000,
        description="Untracked files with a NUL byte in this prefix are treated as binary.",
    )
    remote_name: str = Field(
        default="origin",
        description="Remote searched for <remote>/<branch> when no local base branch exists.",
    )
    default_base_candidates: list[str] = Field(
        default_factory=lambda: ["main", "master"],
        description="Local branches tried, in order, when choosing a default base.",
    )

    @field_validator("context_lines")
    @classmethod
    def validate_context_lines(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"context_lines must be >= 0, got {v}")
        return v

    @field_validator("binary_sniff_bytes")
    @classmethod
    def validate_binary_sniff_bytes(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"binary_sniff_bytes must be > 0, got {v}")
        return v


class ReviewLensConfig(BaseModel):
    """Root configuration for ReviewLens.

    All settings can be configured via:
    1. Environment variables: REVIEWLENS__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
