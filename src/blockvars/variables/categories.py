"""Category descriptors and palette construction.

Each variable category maps to a getter and a setter node kind. The palette
shows one setter/getter pair per variable of a category.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from blockvars.config.constants import (
    DEFAULT_CATEGORY,
    DEFAULT_GETTER_KIND,
    DEFAULT_SETTER_KIND,
    VARIABLE_FIELD,
)
from blockvars.core.logging import get_logger
from blockvars.interfaces import BindsVariable, DeclaresVariables, Renderable
from blockvars.variables.names import names_equal

if TYPE_CHECKING:
    from blockvars.interfaces import NodeKindCatalog, Workspace
    from blockvars.variables.names import NameIndex

log = get_logger("variables.categories")


@dataclass
class PaletteContents:
    """Nodes to display and the gap after each, consumed in lock-step."""

    nodes: list[Any] = field(default_factory=list)
    gaps: list[int] = field(default_factory=list)


class CategoryRegistry:
    """Category -> getter/setter node kind, plus construction of those nodes."""

    def __init__(
        self,
        catalog: NodeKindCatalog,
        *,
        default_getter: str = DEFAULT_GETTER_KIND,
        default_setter: str = DEFAULT_SETTER_KIND,
    ) -> None:
        self.catalog = catalog
        self._getters: dict[str, str] = {DEFAULT_CATEGORY: default_getter}
        self._setters: dict[str, str] = {DEFAULT_CATEGORY: default_setter}

    def register_getter(self, category: str, kind: str) -> None:
        self._getters[category] = kind

    def register_setter(self, category: str, kind: str) -> None:
        self._setters[category] = kind

    def getter_kind(self, category: str) -> str | None:
        return self._getters.get(category)

    def setter_kind(self, category: str) -> str | None:
        return self._setters.get(category)

    def categories(self) -> list[str]:
        """Every category with a registered getter or setter."""
        return sorted(self._getters.keys() | self._setters.keys())

    def get_getter(self, workspace: Workspace, category: str) -> Any | None:
        """New getter node for category in workspace, or None if none is available."""
        return self._construct(workspace, self._getters.get(category))

    def get_setter(self, workspace: Workspace, category: str) -> Any | None:
        """New setter node for category in workspace, or None if none is available."""
        return self._construct(workspace, self._setters.get(category))

    def _construct(self, workspace: Workspace, kind: str | None) -> Any | None:
        if not kind:
            return None
        factory = self.catalog.lookup(kind)
        if factory is None:
            return None
        node = factory(workspace)
        if isinstance(node, Renderable):
            node.init_render()
        return node

    def build_category_contents(
        self,
        names: NameIndex,
        workspace: Workspace,
        category: str,
        include_default_placeholder: bool,
        margin: int,
    ) -> PaletteContents:
        """Setter/getter pairs for every variable of category, sorted by name.

        With include_default_placeholder, the first pair carries whatever name
        the node kind gives itself on construction, and a user variable of that
        same name is not repeated further down.

        Raises:
            InvalidCategoryError: category is not "Default" or a strict type.
        """
        entries: list[str | None] = sorted(
            names.all_variables(category=category), key=str.lower
        )
        if include_default_placeholder:
            entries.insert(0, None)

        contents = PaletteContents()
        default_name: str | None = None
        for entry in entries:
            if entry is not None and names_equal(entry, default_name):
                continue
            getter = self.get_getter(workspace, category)
            setter = self.get_setter(workspace, category)
            if getter is None and setter is None:
                continue

            if entry is None:
                default_name = _bound_name(getter or setter, category)
            else:
                for node in (setter, getter):
                    if isinstance(node, BindsVariable):
                        node.set_field_value(VARIABLE_FIELD, entry)

            if setter is not None:
                contents.nodes.append(setter)
            if getter is not None:
                contents.nodes.append(getter)
            if getter is not None and setter is not None:
                contents.gaps.extend((margin, margin * 3))
            else:
                contents.gaps.append(margin * 2)

        log.debug(
            "palette_built",
            category=category,
            entries=len(entries),
            nodes=len(contents.nodes),
        )
        return contents


def _bound_name(node: Any, category: str) -> str | None:
    """Name a freshly constructed getter/setter assigned itself."""
    if not isinstance(node, DeclaresVariables):
        return None
    declared = node.get_variable_usages().get(category) or [None]
    return declared[0]
