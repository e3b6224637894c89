from __future__ import annotations

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logger():
    """Keep CLI sink changes from leaking between tests."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
