"""Variable registry: names in use, fresh names, rename/delete, palette."""

from blockvars.variables.categories import CategoryRegistry, PaletteContents
from blockvars.variables.generator import UniqueNameGenerator
from blockvars.variables.names import NameIndex, names_equal, single_field_usages
from blockvars.variables.ops import VariableOps
from blockvars.variables.propagation import (
    NodeFailure,
    PropagationReport,
    RenameDeletePropagator,
)

__all__ = [
    "CategoryRegistry",
    "NameIndex",
    "NodeFailure",
    "PaletteContents",
    "PropagationReport",
    "RenameDeletePropagator",
    "UniqueNameGenerator",
    "VariableOps",
    "names_equal",
    "single_field_usages",
]
