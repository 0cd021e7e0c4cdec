"""Rename/delete fan-out across a workspace and every open auxiliary editor.

Only nodes owned by the given workspace are touched. Auxiliary editors are
notified regardless of scope since any of them may be showing the variable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from blockvars.core.errors import PropagationError
from blockvars.core.logging import get_logger
from blockvars.interfaces import AuxiliaryEditor, RemovesVariables, RenamesVariables
from blockvars.variables.names import names_equal, variables_from_node

if TYPE_CHECKING:
    from blockvars.context import RegistryContext
    from blockvars.interfaces import Workspace

log = get_logger("variables.propagation")

PropagationAction = Literal["rename", "delete"]


@dataclass
class NodeFailure:
    """A node whose mutator raised during propagation."""

    node: Any
    error: Exception


@dataclass
class PropagationReport:
    """What a rename or delete touched.

    nodes_updated counts capable nodes that declared the name before the call;
    every capable node is still handed the mutation.
    """

    action: PropagationAction
    nodes_visited: int = 0
    nodes_updated: int = 0
    editors_notified: int = 0
    failures: list[NodeFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class RenameDeletePropagator:
    """Applies rename and delete to every variable-aware node in a workspace."""

    def __init__(self, context: RegistryContext) -> None:
        self._context = context

    def rename(
        self, old_name: str, new_name: str | None, workspace: Workspace
    ) -> PropagationReport:
        """Rename old_name to new_name on every node of workspace.

        An empty new_name or one identical to old_name does nothing. The check
        is exact: ``Foo`` -> ``foo`` is carried out, changing only the casing.

        Raises:
            PropagationError: One or more nodes raised (see propagation.on_error).
        """
        report = PropagationReport(action="rename")
        if not new_name or new_name == old_name:
            return report

        self._apply_to_nodes(
            report,
            workspace,
            old_name,
            RenamesVariables,
            lambda node: node.rename_variable(old_name, new_name),
        )
        self._notify_editors(report, lambda editor: editor.rename_parameter(old_name, new_name))
        log.info(
            "variable_renamed",
            old_name=old_name,
            new_name=new_name,
            nodes_updated=report.nodes_updated,
            editors_notified=report.editors_notified,
        )
        self._raise_collected(report)
        return report

    def delete(self, name: str, workspace: Workspace) -> PropagationReport:
        """Remove name from every node of workspace.

        Deleting a name no node uses is harmless; each node decides what
        removal means for it.

        Raises:
            PropagationError: One or more nodes raised (see propagation.on_error).
        """
        report = PropagationReport(action="delete")
        self._apply_to_nodes(
            report,
            workspace,
            name,
            RemovesVariables,
            lambda node: node.remove_variable(name),
        )
        self._notify_editors(report, lambda editor: editor.remove_parameter(name))
        log.info(
            "variable_deleted",
            name=name,
            nodes_updated=report.nodes_updated,
            editors_notified=report.editors_notified,
        )
        self._raise_collected(report)
        return report

    def _apply_to_nodes(
        self,
        report: PropagationReport,
        workspace: Workspace,
        name: str,
        capability: type,
        mutate: Callable[[Any], None],
    ) -> None:
        abort = self._context.config.propagation.on_error == "abort"
        # Snapshot first: a delete may detach nodes from the workspace
        nodes = list(workspace.get_all_nodes(include_shared=False))
        for node in nodes:
            report.nodes_visited += 1
            if not isinstance(node, capability):
                continue
            held = any(names_equal(used, name) for used in variables_from_node(node))
            try:
                mutate(node)
            except Exception as e:
                log.warning(
                    "variable_propagation_node_failed",
                    action=report.action,
                    node=repr(node),
                    error=str(e),
                )
                report.failures.append(NodeFailure(node=node, error=e))
                if abort:
                    raise PropagationError.node_failed(report.action, node, e, report) from e
                continue
            if held:
                report.nodes_updated += 1

    def _notify_editors(
        self, report: PropagationReport, update: Callable[[AuxiliaryEditor], None]
    ) -> None:
        for editor in list(self._context.editors):
            if not editor.is_open():
                continue
            update(editor)
            editor.refresh_params_everywhere()
            report.editors_notified += 1

    def _raise_collected(self, report: PropagationReport) -> None:
        if report.failures:
            raise PropagationError.partial_failure(report.action, report)
