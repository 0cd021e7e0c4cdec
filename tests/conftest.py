"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import logging
import sys
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of blockvars modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("blockvars"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _reset_logging():
    """Leave no handlers, structlog config or operation id behind between tests."""
    yield
    from blockvars.core.logging import clear_operation_id

    clear_operation_id()
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    structlog.reset_defaults()
