from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_datagenerator_logging():
    yield
    root = logging.getLogger("datagenerator")
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()
    if hasattr(root, "_datagenerator_configured"):
        delattr(root, "_datagenerator_configured")
