"""In-memory implementations of the collaborator protocols."""

from blockvars.memory.blocks import Block, BlockWorkspace, VariableBlock
from blockvars.memory.catalog import (
    DEFAULT_VARIABLE_NAME,
    BlockKindCatalog,
    default_catalog,
    variable_block_factory,
)
from blockvars.memory.editors import EditorRegistry, ParameterEditor
from blockvars.memory.types import StrictTypeValidator

__all__ = [
    "DEFAULT_VARIABLE_NAME",
    "Block",
    "BlockKindCatalog",
    "BlockWorkspace",
    "EditorRegistry",
    "ParameterEditor",
    "StrictTypeValidator",
    "VariableBlock",
    "default_catalog",
    "variable_block_factory",
]
