"""Variable operations - the surface UI command handlers call.

Wires NameIndex, UniqueNameGenerator, RenameDeletePropagator and
CategoryRegistry around one RegistryContext. Every mutating call runs under an
operation id so its log events can be correlated; an id the host already set
for its own UI action is reused.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from blockvars.core.logging import get_logger, operation_scope
from blockvars.variables.categories import PaletteContents
from blockvars.variables.generator import UniqueNameGenerator
from blockvars.variables.names import NameIndex, variables_from_node
from blockvars.variables.propagation import PropagationReport, RenameDeletePropagator

if TYPE_CHECKING:
    from blockvars.context import RegistryContext
    from blockvars.interfaces import Node, Workspace

log = get_logger("variables.ops")


class VariableOps:
    """Variable registry operations for one process-scoped context."""

    def __init__(self, context: RegistryContext) -> None:
        self._context = context
        self.names = NameIndex(context)
        self.generator = UniqueNameGenerator(context, self.names)
        self.propagator = RenameDeletePropagator(context)

    @property
    def context(self) -> RegistryContext:
        return self._context

    # -- queries -------------------------------------------------------------

    def all_variables(
        self,
        roots: Node | Iterable[Node] | None = None,
        category: str | None = None,
    ) -> list[str]:
        return self.names.all_variables(roots, category)

    def variables_from_node(self, node: Any) -> list[str]:
        return [name for name in variables_from_node(node) if name]

    def generate_unique_name(self, base: str | None = None) -> str:
        return self.generator.generate(base)

    # -- mutations -----------------------------------------------------------

    def rename_variable(
        self, old_name: str, new_name: str | None, workspace: Workspace
    ) -> PropagationReport:
        with operation_scope():
            return self.propagator.rename(old_name, new_name, workspace)

    def delete_variable(self, name: str, workspace: Workspace) -> PropagationReport:
        with operation_scope():
            return self.propagator.delete(name, workspace)

    # -- categories and palette ----------------------------------------------

    def register_getter(self, category: str, kind: str) -> None:
        self._context.categories.register_getter(category, kind)
        log.debug("getter_registered", category=category, kind=kind)

    def register_setter(self, category: str, kind: str) -> None:
        self._context.categories.register_setter(category, kind)
        log.debug("setter_registered", category=category, kind=kind)

    def get_getter(self, workspace: Workspace, category: str) -> Any | None:
        return self._context.categories.get_getter(workspace, category)

    def get_setter(self, workspace: Workspace, category: str) -> Any | None:
        return self._context.categories.get_setter(workspace, category)

    def flyout_category(
        self,
        workspace: Workspace,
        category: str,
        include_default_placeholder: bool = False,
        margin: int | None = None,
    ) -> PaletteContents:
        """Palette nodes and gaps for category, built inside workspace."""
        if margin is None:
            margin = self._context.config.palette.margin
        return self._context.categories.build_category_contents(
            self.names, workspace, category, include_default_placeholder, margin
        )
