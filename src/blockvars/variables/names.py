"""Name index: the set of variable names currently in use.

Nothing is cached. Every query walks the live node tree, so the answer is
always current with respect to edits made by other parts of the host.

Names are compared case-insensitively. Variables and node-kind names (such as
procedure names) share one namespace; the index only reports variables, and
callers that also need procedure names must merge them in.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from blockvars.config.constants import DEFAULT_CATEGORY, VARIABLE_FIELD
from blockvars.core.errors import InvalidCategoryError
from blockvars.core.logging import get_logger
from blockvars.interfaces import DeclaresVariables, Node

if TYPE_CHECKING:
    from blockvars.context import RegistryContext

log = get_logger("variables.names")


def names_equal(a: str | None, b: str | None) -> bool:
    """Case-insensitive name comparison."""
    if a is None or b is None:
        return a is b
    return a.lower() == b.lower()


def single_field_usages(node: Any, category: str | None = None) -> dict[str, list[str | None]]:
    """Standard ``get_variable_usages`` for node kinds with one ``VAR`` field.

    Node kinds that hold a single variable reference can delegate to this
    instead of writing their own.
    """
    return {category or DEFAULT_CATEGORY: [node.get_field_value(VARIABLE_FIELD)]}


def variables_from_node(node: Any) -> list[str | None]:
    """All variable names a node declares, across every category."""
    if not isinstance(node, DeclaresVariables):
        return []
    usages = node.get_variable_usages()
    names: list[str | None] = []
    for category_names in usages.values():
        names.extend(category_names)
    return names


class CaseInsensitiveNameSet:
    """Ordered name set keyed by lower-cased name.

    The first casing seen for a key is kept as the display form.
    """

    def __init__(self, names: Iterable[str | None] = ()) -> None:
        self._names: dict[str, str] = {}
        for name in names:
            self.add(name)

    def add(self, name: str | None) -> bool:
        """Insert name; returns False for empty names and existing keys."""
        # Half-built nodes report None
        if not name:
            return False
        key = name.lower()
        if key in self._names:
            return False
        self._names[key] = name
        return True

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def to_list(self) -> list[str]:
        return list(self._names.values())


class NameIndex:
    """Derives the in-use variable names from a node collection."""

    def __init__(self, context: RegistryContext) -> None:
        self._context = context

    def all_variables(
        self,
        roots: Node | Iterable[Node] | None = None,
        category: str | None = None,
    ) -> list[str]:
        """Every variable name in use, de-duplicated case-insensitively.

        Args:
            roots: A node or any collection of nodes; each contributes itself and its
                descendants. When omitted, every node of the default workspace
                is searched (no default workspace yields an empty list).
            category: Only report names declared under this exact category.
                Must be "Default" or a category the strict-type validator
                recognizes.

        Returns:
            Canonical display names in first-seen order.

        Raises:
            InvalidCategoryError: The category is unknown. Raised before any
                node is visited.
        """
        return self.collect(roots, category).to_list()

    def collect(
        self,
        roots: Node | Iterable[Node] | None = None,
        category: str | None = None,
    ) -> CaseInsensitiveNameSet:
        """Same query as all_variables, returned as a CaseInsensitiveNameSet."""
        self._check_category(category)

        found = CaseInsensitiveNameSet()
        nodes = self._nodes(roots)
        if nodes is None:
            log.debug("no_default_workspace")
            return found

        for node in nodes:
            if not isinstance(node, DeclaresVariables):
                continue
            if category:
                names = node.get_variable_usages().get(category) or []
            else:
                names = variables_from_node(node)
            for name in names:
                found.add(name)
        return found

    def contains(self, name: str, roots: Node | Iterable[Node] | None = None) -> bool:
        """Whether name is in use anywhere in the collection, ignoring case."""
        return name in self.collect(roots)

    def _check_category(self, category: str | None) -> None:
        if not category or category == DEFAULT_CATEGORY:
            return
        validator = self._context.validator
        if validator is not None and not validator.is_recognized_category(category):
            raise InvalidCategoryError.unrecognized(category)

    def _nodes(self, roots: Node | Iterable[Node] | None) -> list[Any] | None:
        if roots is not None:
            group = [roots] if isinstance(roots, Node) else roots
            nodes: list[Any] = []
            for root in group:
                nodes.extend(root.get_descendants())
            return nodes
        workspace = self._context.default_workspace
        if workspace is None:
            return None
        return list(workspace.get_all_nodes())
