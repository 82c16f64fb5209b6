"""Global test fixtures."""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ROLEGUARD_* settings out of the tests."""
    for name in list(os.environ):
        if name.startswith("ROLEGUARD_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """CLI commands call configure_logging(), which replaces root handlers."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
