"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the root level and handlers installed by configure_logging."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
