"""Global test fixtures."""

import logging
import os

import pytest

# Set the session secret before any test module imports Config.
# This must happen at module load time, not in a fixture.
os.environ.setdefault("PANELAUTH_SESSION__SECRET", "test-secret-for-unit-tests-min-32")


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
