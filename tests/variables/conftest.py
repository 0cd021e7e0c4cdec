"""Shared fixtures for variable registry tests."""

from __future__ import annotations

import pytest

from blockvars.config.models import BlockVarsConfig
from blockvars.context import RegistryContext
from blockvars.memory import (
    BlockKindCatalog,
    BlockWorkspace,
    EditorRegistry,
    VariableBlock,
    default_catalog,
)
from blockvars.variables import VariableOps


@pytest.fixture
def workspace() -> BlockWorkspace:
    return BlockWorkspace("main")


@pytest.fixture
def catalog() -> BlockKindCatalog:
    return default_catalog()


@pytest.fixture
def editors() -> EditorRegistry:
    return EditorRegistry()


@pytest.fixture
def config() -> BlockVarsConfig:
    return BlockVarsConfig()


@pytest.fixture
def context(
    catalog: BlockKindCatalog,
    editors: EditorRegistry,
    workspace: BlockWorkspace,
    config: BlockVarsConfig,
) -> RegistryContext:
    return RegistryContext.create(
        catalog, config=config, editors=editors, default_workspace=workspace
    )


@pytest.fixture
def ops(context: RegistryContext) -> VariableOps:
    return VariableOps(context)


@pytest.fixture
def add_vars(workspace: BlockWorkspace):
    """Add one setter block per name to the default workspace."""

    def add(*names: str | None, category: str = "Default") -> list[VariableBlock]:
        return [
            VariableBlock(workspace, "variables_set", name=name, category=category)
            for name in names
        ]

    return add
