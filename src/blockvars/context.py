"""Process-scoped registry state.

One RegistryContext is built at process start and handed to every component.
It holds the two shared registries (category descriptors and live auxiliary
editors) along with the collaborators the components query.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from blockvars.config.models import BlockVarsConfig
from blockvars.interfaces import CategoryValidator, EditorSource, NodeKindCatalog, Workspace
from blockvars.variables.categories import CategoryRegistry


@dataclass
class RegistryContext:
    """Shared state threaded through NameIndex, generator, propagator and palette."""

    categories: CategoryRegistry
    editors: EditorSource = field(default_factory=list)
    validator: CategoryValidator | None = None
    default_workspace: Workspace | None = None
    config: BlockVarsConfig = field(default_factory=BlockVarsConfig)

    @property
    def catalog(self) -> NodeKindCatalog:
        return self.categories.catalog

    @classmethod
    def create(
        cls,
        catalog: NodeKindCatalog,
        *,
        config: BlockVarsConfig | None = None,
        editors: EditorSource | None = None,
        validator: CategoryValidator | None = None,
        default_workspace: Workspace | None = None,
    ) -> RegistryContext:
        """Build a context with the Default category pre-registered from config."""
        config = config or BlockVarsConfig()
        categories = CategoryRegistry(
            catalog,
            default_getter=config.categories.default_getter,
            default_setter=config.categories.default_setter,
        )
        return cls(
            categories=categories,
            editors=editors if editors is not None else [],
            validator=validator,
            default_workspace=default_workspace,
            config=config,
        )
