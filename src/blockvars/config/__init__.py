"""Config module exports."""

from blockvars.config.loader import BlockVarsSettings, load_config
from blockvars.config.models import (
    BlockVarsConfig,
    CategoriesConfig,
    LoggingConfig,
    NamingConfig,
    PaletteConfig,
    PropagationConfig,
)

__all__ = [
    "load_config",
    "BlockVarsConfig",
    "BlockVarsSettings",
    "CategoriesConfig",
    "LoggingConfig",
    "NamingConfig",
    "PaletteConfig",
    "PropagationConfig",
]
