"""Core module exports."""

from reviewlens.core.errors import ConfigError, ErrorCode, ReviewLensError
from reviewlens.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ReviewLensError",
    "ConfigError",
    "ErrorCode",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
]
