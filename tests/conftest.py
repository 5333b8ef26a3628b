"""Shared fixtures for the uploader test suite."""

import logging

import pytest
import structlog

from sonic_uploader.core.logging import _BRIDGED_LOGGERS, HANDLER_NAME


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo configure_structlog() so no test writes to another's captured stdout."""
    yield
    structlog.reset_defaults()
    for name in _BRIDGED_LOGGERS:
        target = logging.getLogger(name)
        for handler in list(target.handlers):
            if handler.get_name() == HANDLER_NAME:
                target.removeHandler(handler)
        target.setLevel(logging.NOTSET)
