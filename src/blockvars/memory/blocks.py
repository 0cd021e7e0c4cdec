"""In-memory blocks and workspaces.

Minimal implementations of the node and workspace protocols. The host editor
brings its own; these back the CLI and the test suite.
"""

from __future__ import annotations

from itertools import count
from typing import Any

from blockvars.config.constants import DEFAULT_CATEGORY, VARIABLE_FIELD
from blockvars.variables.names import names_equal, single_field_usages

_block_ids = count(1)


class Block:
    """A node with named fields and child blocks."""

    def __init__(
        self,
        workspace: BlockWorkspace | None,
        kind: str,
        fields: dict[str, Any] | None = None,
    ) -> None:
        self.id = next(_block_ids)
        self.kind = kind
        self.fields: dict[str, Any] = dict(fields or {})
        self.children: list[Block] = []
        self.parent: Block | None = None
        self.workspace = workspace
        self.rendered = False
        self.disposed = False
        if workspace is not None:
            workspace.add_top_block(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind}#{self.id}>"

    def get_field_value(self, field_name: str) -> Any:
        return self.fields.get(field_name)

    def set_field_value(self, field_name: str, value: str) -> None:
        self.fields[field_name] = value

    def init_render(self) -> None:
        self.rendered = True

    def append_child(self, child: Block) -> Block:
        if child.parent is not None:
            child.parent.children.remove(child)
        elif child.workspace is not None:
            child.workspace.remove_top_block(child)
        child.parent = self
        self.children.append(child)
        return child

    def get_descendants(self) -> list[Block]:
        """This block followed by every block nested under it, depth first."""
        found: list[Block] = [self]
        for child in self.children:
            found.extend(child.get_descendants())
        return found

    def dispose(self) -> None:
        """Detach this block (and its children) from its parent or workspace."""
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None
        elif self.workspace is not None:
            self.workspace.remove_top_block(self)
        self.disposed = True


class VariableBlock(Block):
    """Getter or setter holding one variable name in its VAR field."""

    def __init__(
        self,
        workspace: BlockWorkspace | None,
        kind: str,
        name: str | None = None,
        category: str = DEFAULT_CATEGORY,
    ) -> None:
        super().__init__(workspace, kind, {VARIABLE_FIELD: name})
        self.category = category

    @property
    def variable(self) -> str | None:
        return self.get_field_value(VARIABLE_FIELD)

    def get_variable_usages(self) -> dict[str, list[str | None]]:
        return single_field_usages(self, self.category)

    def rename_variable(self, old_name: str, new_name: str) -> None:
        if names_equal(old_name, self.variable):
            self.set_field_value(VARIABLE_FIELD, new_name)

    def remove_variable(self, name: str) -> None:
        if names_equal(name, self.variable):
            self.dispose()


class BlockWorkspace:
    """A flat list of top blocks, optionally sharing a view of another workspace.

    A modal workspace (e.g. a function editor) shows the main workspace's
    blocks through ``shared``; those are reported only with include_shared.
    """

    def __init__(self, name: str = "main", shared: BlockWorkspace | None = None) -> None:
        self.name = name
        self.shared = shared
        self.top_blocks: list[Block] = []

    def __repr__(self) -> str:
        return f"<BlockWorkspace {self.name}>"

    def add_top_block(self, block: Block) -> None:
        self.top_blocks.append(block)

    def remove_top_block(self, block: Block) -> None:
        self.top_blocks.remove(block)

    def get_all_nodes(self, *, include_shared: bool = True) -> list[Block]:
        nodes: list[Block] = []
        for block in self.top_blocks:
            nodes.extend(block.get_descendants())
        if include_shared and self.shared is not None:
            nodes.extend(self.shared.get_all_nodes(include_shared=False))
        return nodes

    def clear(self) -> None:
        for block in list(self.top_blocks):
            block.dispose()
