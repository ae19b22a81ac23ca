"""Config module exports."""

from reviewlens.config.loader import load_config
from reviewlens.config.models import (
    DiffConfig,
    LoggingConfig,
    LogOutputConfig,
    ReviewLensConfig,
)

__all__ = [
    "load_config",
    "ReviewLensConfig",
    "DiffConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
