"""Global test configuration.

Keeps tests hermetic: runner variables (INPUT_*, GITHUB_OUTPUT, ...) and
config overrides from the developer's shell never leak into a test, and the
package logger is reset after tests that call configure_logging().
"""

import logging
import os

import pytest

_RUNNER_PREFIXES = ("INPUT_", "ROOTLY_ALERT_")
_RUNNER_VARIABLES = ("GITHUB_OUTPUT", "GITHUB_ACTIONS")


@pytest.fixture(autouse=True)
def _clean_runner_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith(_RUNNER_PREFIXES) or key in _RUNNER_VARIABLES:
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("rootly_alert")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
