import logging

import pytest

from tests.helpers import containing_block


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that setup_logging attached during a test."""
    yield
    logger = logging.getLogger("wink_layout")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def viewport():
    return containing_block(800.0, height=600.0)
