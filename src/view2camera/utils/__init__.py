"""Common utilities."""

from .validation import (
    InvalidArgument,
    is_finite_number,
    validate_bounds,
)
from .logger import (
    DEBUG_ENV_VAR,
    is_debug_enabled,
    debug_print,
    PipelineLogger,
    NullLogger,
    PrintLogger,
    get_logger,
)

__all__ = [
    # Validation
    "InvalidArgument",
    "is_finite_number",
    "validate_bounds",
    
    # Logging
    "DEBUG_ENV_VAR",
    "is_debug_enabled",
    "debug_print",
    "PipelineLogger",
    "NullLogger",
    "PrintLogger",
    "get_logger",
]
