"""Collaborator protocols.

The registry never owns the node tree. Everything it knows comes from these
capabilities, checked per node with ``isinstance`` against the
``runtime_checkable`` protocols below. A node kind that does not implement a
capability is simply skipped by the operations that need it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

VariableUsages = Mapping[str, Sequence[str | None]]
"""Category -> ordered variable names. Names may be None on half-built nodes."""


# =============================================================================
# Node capabilities
# =============================================================================


@runtime_checkable
class Node(Protocol):
    """A unit of the program tree."""

    def get_descendants(self) -> list[Any]:
        """This node followed by every node nested under it."""
        ...


@runtime_checkable
class DeclaresVariables(Protocol):
    """Node that reports the variables it uses."""

    def get_variable_usages(self) -> VariableUsages: ...


@runtime_checkable
class RenamesVariables(Protocol):
    """Node that can rewrite its references to a variable."""

    def rename_variable(self, old_name: str, new_name: str) -> None: ...


@runtime_checkable
class RemovesVariables(Protocol):
    """Node that can drop its references to a variable."""

    def remove_variable(self, name: str) -> None: ...


@runtime_checkable
class BindsVariable(Protocol):
    """Node whose named fields can be set (getter/setter palette nodes)."""

    def set_field_value(self, field_name: str, value: str) -> None: ...


@runtime_checkable
class Renderable(Protocol):
    """Node that needs an explicit render init before it is displayed."""

    def init_render(self) -> None: ...


# =============================================================================
# Containers and registries
# =============================================================================


@runtime_checkable
class Workspace(Protocol):
    """Container of an independent node tree."""

    def get_all_nodes(self, *, include_shared: bool = True) -> list[Any]:
        """Every node in the workspace.

        ``include_shared=False`` restricts the result to nodes owned by this
        workspace, leaving out nodes of any workspace it shares a view with.
        """
        ...


NodeKindFactory = Callable[[Any], Any]
"""Builds a new node of one kind inside the given workspace."""


class NodeKindCatalog(Protocol):
    """Global catalog of node kinds."""

    def lookup(self, kind: str) -> NodeKindFactory | None: ...


@runtime_checkable
class AuxiliaryEditor(Protocol):
    """Editor view (e.g. a function editor) with its own parameter list."""

    def is_open(self) -> bool: ...

    def rename_parameter(self, old_name: str, new_name: str) -> None: ...

    def remove_parameter(self, name: str) -> None: ...

    def refresh_params_everywhere(self) -> None: ...


EditorSource = Iterable[AuxiliaryEditor]
"""Live auxiliary-editor instances; iterated afresh on every propagation."""


class CategoryValidator(Protocol):
    """Strict-type system deciding which category names are recognized."""

    def is_recognized_category(self, name: str) -> bool: ...
