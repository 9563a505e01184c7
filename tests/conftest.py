from __future__ import annotations

import logging

import pytest

from squeeze.logs import ExitStreamHandler


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger()
    for handler in [h for h in logger.handlers if isinstance(h, ExitStreamHandler)]:
        logger.removeHandler(handler)
    logger.setLevel(logging.WARNING)
