"""blockvars - case-insensitive variable registry for block workspaces."""

from blockvars.context import RegistryContext
from blockvars.core.errors import (
    BlockVarsError,
    InvalidCategoryError,
    NamingError,
    PropagationError,
)
from blockvars.variables import (
    CategoryRegistry,
    NameIndex,
    PaletteContents,
    PropagationReport,
    RenameDeletePropagator,
    UniqueNameGenerator,
    VariableOps,
)

__version__ = "0.1.0"

__all__ = [
    "BlockVarsError",
    "CategoryRegistry",
    "InvalidCategoryError",
    "NameIndex",
    "NamingError",
    "PaletteContents",
    "PropagationError",
    "PropagationReport",
    "RegistryContext",
    "RenameDeletePropagator",
    "UniqueNameGenerator",
    "VariableOps",
    "__version__",
]
