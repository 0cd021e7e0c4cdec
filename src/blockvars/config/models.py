"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (BLOCKVARS__SECTION__KEY)
3. Repo YAML (.blockvars/config.yaml)
4. Global YAML (~/.config/blockvars/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    BLOCKVARS__<SECTION>__<KEY>=<VALUE>

Examples:
    BLOCKVARS__LOGGING__LEVEL=DEBUG
    BLOCKVARS__NAMING__MAX_ATTEMPTS=5000
    BLOCKVARS__PROPAGATION__ON_ERROR=abort
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from blockvars.config.constants import DEFAULT_GETTER_KIND, DEFAULT_SETTER_KIND

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FailurePolicy = Literal["continue", "abort"]


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
        BLOCKVARS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every node touched by a rename.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class NamingConfig(BaseModel):
    """Unique name generation.

    Env vars:
        BLOCKVARS__NAMING__MAX_ATTEMPTS: Candidate cap for a single search
    """

    max_attempts: int = Field(
        default=100_000,
        description="Upper bound on candidates tried before giving up. "
        "Only reachable with pathological namespaces.",
    )

    @field_validator("max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_attempts must be positive, got {v}")
        return v


class PropagationConfig(BaseModel):
    """Rename/delete fan-out.

    Env vars:
        BLOCKVARS__PROPAGATION__ON_ERROR: continue | abort
    """

    on_error: FailurePolicy = Field(
        default="continue",
        description="continue: visit every node, then raise one aggregated error. "
        "abort: stop at the first node that raises.",
    )


class PaletteConfig(BaseModel):
    """Palette (flyout) construction.

    Env vars:
        BLOCKVARS__PALETTE__MARGIN: Base gap between palette nodes
    """

    margin: int = Field(default=8, description="Base gap between palette entries.")

    @field_validator("margin")
    @classmethod
    def validate_margin(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"margin must be >= 0, got {v}")
        return v


class CategoriesConfig(BaseModel):
    """Node kinds pre-registered for the Default category."""

    default_getter: str = DEFAULT_GETTER_KIND
    default_setter: str = DEFAULT_SETTER_KIND


class BlockVarsConfig(BaseModel):
    """Root configuration for blockvars."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    propagation: PropagationConfig = Field(default_factory=PropagationConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    categories: CategoriesConfig = Field(default_factory=CategoriesConfig)
