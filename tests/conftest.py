from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.component_tree import ComponentTree


@pytest.fixture
def tree(tmp_path: Path) -> ComponentTree:
    """Provide a reusable theme project rooted at the pytest tmp_path."""
    return ComponentTree(tmp_path)


@pytest.fixture(autouse=True)
def _reset_theme_builder_logger():
    """Undo configure_logging() so caplog keeps seeing theme_builder records."""
    yield
    logger = logging.getLogger("theme_builder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
