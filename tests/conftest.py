"""
Shared fixtures for the test suite.
"""
import logging

import pytest

# Re-export fixtures from the helper module
from tests.utils.actor_test_helpers import (
    recording_store,
    make_fetcher,
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Leave the package logger without handlers after each test."""
    yield
    logger = logging.getLogger("waitforit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
