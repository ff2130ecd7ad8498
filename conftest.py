"""
Repository-level pytest configuration.

Why this exists:
  - Register the ``--run-ui`` switch for live browser tests
  - Initialise logging once per session from the suite settings
  - Keep behavior explicit and discoverable

Important:
  Live UI tests drive a real browser against the public demo storefront.
  They are skipped unless ``--run-ui`` is given, so a plain ``pytest`` run
  only executes the offline unit suite.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from autotest_tools.common import init_logger
from testsuites.ui_testing.framework.settings import get_settings


def pytest_addoption(parser):
    parser.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run live browser UI tests against the configured base.url",
    )


def pytest_configure(config):
    settings = get_settings()
    init_logger(
        level=settings.get_property("logging.level"),
        log_file=settings.get_property("logging.file"),
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
