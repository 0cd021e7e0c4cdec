"""Node-kind catalog for in-memory blocks."""

from __future__ import annotations

from functools import partial

from blockvars.config.constants import DEFAULT_CATEGORY, DEFAULT_GETTER_KIND, DEFAULT_SETTER_KIND
from blockvars.interfaces import NodeKindFactory
from blockvars.memory.blocks import BlockWorkspace, VariableBlock

DEFAULT_VARIABLE_NAME = "i"


class BlockKindCatalog:
    """Kind name -> factory building a block of that kind in a workspace."""

    def __init__(self) -> None:
        self._factories: dict[str, NodeKindFactory] = {}

    def register(self, kind: str, factory: NodeKindFactory) -> None:
        self._factories[kind] = factory

    def lookup(self, kind: str) -> NodeKindFactory | None:
        return self._factories.get(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories


def variable_block_factory(
    kind: str,
    category: str,
    default_name: str = DEFAULT_VARIABLE_NAME,
) -> NodeKindFactory:
    """Factory for getter/setter blocks that start out bound to default_name."""

    def build(workspace: BlockWorkspace) -> VariableBlock:
        return VariableBlock(workspace, kind, name=default_name, category=category)

    return build


def default_catalog(default_name: str = DEFAULT_VARIABLE_NAME) -> BlockKindCatalog:
    """Catalog with the standard Default-category getter and setter."""
    catalog = BlockKindCatalog()
    make = partial(variable_block_factory, category=DEFAULT_CATEGORY, default_name=default_name)
    catalog.register(DEFAULT_GETTER_KIND, make(DEFAULT_GETTER_KIND))
    catalog.register(DEFAULT_SETTER_KIND, make(DEFAULT_SETTER_KIND))
    return catalog
