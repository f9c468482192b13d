import logging

import pytest


@pytest.fixture(autouse=True)
def reset_seqmap_logger():
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("seqmap")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
