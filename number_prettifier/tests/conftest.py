import logging
from typing import Iterator

import pytest

from number_prettifier.logging_utils import BASE_LOGGER, CONSOLE_HANDLER_NAME


@pytest.fixture(autouse=True)
def _detach_console_handler() -> Iterator[None]:
    """Drop the stderr handler the CLI installs so it never outlives a captured stream."""

    yield
    for handler in list(BASE_LOGGER.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            BASE_LOGGER.removeHandler(handler)
    BASE_LOGGER.setLevel(logging.NOTSET)
