"""Shared fixtures: logging isolation and sample buffers."""

import logging
import sys

import pytest

from pathmorph.utils import logging_config


@pytest.fixture
def restore_logging():
    """Undo setup_logging() side effects on the root logger."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_excepthook = sys.excepthook
    yield
    logging_config.shutdown()
    sys.excepthook = saved_excepthook
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
    logging.captureWarnings(False)
    logging_config.pop_context()


@pytest.fixture
def square_open():
    """Three sides of a 10 mm square: 4 points, 3 edges."""
    return [0.0, 0.0, 10.0, 0.0, 10.0, 10.0, 0.0, 10.0]


@pytest.fixture
def diagonal():
    """Straight diagonal with 3 points."""
    return [0.0, 0.0, 5.0, 5.0, 10.0, 10.0]
