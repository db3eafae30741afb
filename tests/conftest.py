import logging
import os

import pytest
import structlog


def pytest_configure(config):
    os.environ.setdefault("STOCKROOM_ENV", "test")


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configuration done by CLI invocations."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()
