import random

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect multilities log records for the duration of a test."""
    messages = []
    logger.enable("multilities")
    sink_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(sink_id)
    logger.disable("multilities")


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so statistical tests are reproducible."""
    return random.Random(1234)
