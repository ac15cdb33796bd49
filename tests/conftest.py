"""Shared test fixtures for all tests.

This file imports and re-exports fixtures from the fixtures/ module so they
are automatically discovered by pytest.
"""

# Import all fixtures from organized modules
from tests.fixtures.config import (  # noqa: F401
    custom_settings,
    default_settings,
    isolated_env,
    reset_logging,
)
from tests.fixtures.editor import (  # noqa: F401
    dispatcher,
    editor,
    sample_file,
    sample_tree,
)
