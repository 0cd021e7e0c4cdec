"""Core module exports."""

from blockvars.core.errors import (
    BlockVarsError,
    ConfigError,
    ErrorCode,
    InvalidCategoryError,
    NamingError,
    PropagationError,
)
from blockvars.core.logging import (
    clear_operation_id,
    configure_logging,
    get_logger,
    get_operation_id,
    operation_scope,
    set_operation_id,
)

__all__ = [
    # Errors
    "BlockVarsError",
    "ConfigError",
    "ErrorCode",
    "InvalidCategoryError",
    "NamingError",
    "PropagationError",
    # Logging
    "clear_operation_id",
    "configure_logging",
    "get_logger",
    "get_operation_id",
    "operation_scope",
    "set_operation_id",
]
