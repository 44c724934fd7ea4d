"""Shared fixtures."""

import logging

import pytest

from constants import Constants

_TUNABLES = (
    "SUPPORTED_MAJORS",
    "VERSIONS_COMMAND",
    "SYSTEM_PROBE_COMMAND",
    "COMMAND_TIMEOUT_SEC",
)

_ENV_VARS = (
    Constants.ENV_DEBUG,
    Constants.ENV_LOG_LEVEL,
    Constants.ENV_CONFIG,
    Constants.ENV_SUPPORTED_MAJORS,
    Constants.ENV_VERSIONS_COMMAND,
    Constants.ENV_PROBE_COMMAND,
    Constants.ENV_COMMAND_TIMEOUT,
)


@pytest.fixture(autouse=True)
def restore_constants(monkeypatch):
    """Undo configuration writes onto Constants and clear tool env vars."""
    saved = {name: getattr(Constants, name) for name in _TUNABLES}
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield
    for name, value in saved.items():
        setattr(Constants, name, value)


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers added by configure_logging() so streams do not leak across tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
