"""Shared test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_lifegrid_logger():
    """Drop handlers installed by setup_logging so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("lifegrid")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
