import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # run_cli rebinds the sink to whatever sys.stderr was during the test
    logger.remove()
    logger.add(sys.__stderr__, level="WARNING")
