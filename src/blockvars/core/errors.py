"""blockvars error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Category
- 4xxx: Naming
- 5xxx: Propagation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Category (3xxx)
    CATEGORY_INVALID = 3001

    # Naming (4xxx)
    NAMING_EXHAUSTED = 4001

    # Propagation (5xxx)
    PROPAGATION_NODE_FAILED = 5001
    PROPAGATION_PARTIAL_FAILURE = 5002


@dataclass(frozen=True, slots=True)
class BlockVarsError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CATEGORY_INVALID')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(BlockVarsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> ConfigError:
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> ConfigError:
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class InvalidCategoryError(BlockVarsError):
    """A category filter that is neither 'Default' nor a recognized strict type."""

    @classmethod
    def unrecognized(cls, category: str) -> InvalidCategoryError:
        return cls(
            code=ErrorCode.CATEGORY_INVALID,
            message=f'Variable category must be "Default" or a strict type, got {category!r}',
            details={"category": category},
        )


class NamingError(BlockVarsError):
    """Unique name generation errors."""

    @classmethod
    def exhausted_search_space(cls, stem: str, attempts: int) -> NamingError:
        return cls(
            code=ErrorCode.NAMING_EXHAUSTED,
            message=f"No free name found for {stem!r} after {attempts} attempts",
            details={"stem": stem, "attempts": attempts},
        )


class PropagationError(BlockVarsError):
    """Rename/delete fan-out failures.

    ``details["report"]`` carries the PropagationReport as far as it got.
    """

    @classmethod
    def node_failed(
        cls, action: str, node: Any, error: BaseException, report: Any
    ) -> PropagationError:
        return cls(
            code=ErrorCode.PROPAGATION_NODE_FAILED,
            message=f"{action} aborted: {type(error).__name__}: {error}",
            details={"action": action, "node": repr(node), "report": report},
        )

    @classmethod
    def partial_failure(cls, action: str, report: Any) -> PropagationError:
        count = len(report.failures)
        return cls(
            code=ErrorCode.PROPAGATION_PARTIAL_FAILURE,
            message=f"{action} failed on {count} of {report.nodes_visited} nodes",
            details={"action": action, "failed": count, "report": report},
        )
