"""
Offline fixtures for framework unit tests.

Playwright objects are replaced by ``unittest.mock`` doubles so the tests
run without a browser installed.
"""

from typing import Generator
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, Playwright

from testsuites.ui_testing.framework.browser_manager import BrowserKind, BrowserSession
from testsuites.ui_testing.framework.settings import (
    DEFAULT_SETTINGS,
    SETTINGS_FILE_ENV,
    Settings,
    env_key_for,
    reset_settings,
)


OVERRIDABLE_KEYS = list(DEFAULT_SETTINGS) + ["test.url", "screenshot.path"]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch) -> Generator[None, None, None]:
    """Drop environment overrides and the cached process-wide settings."""
    for key in OVERRIDABLE_KEYS:
        monkeypatch.delenv(env_key_for(key), raising=False)
    monkeypatch.delenv(SETTINGS_FILE_ENV, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Default settings with a one-second explicit wait and a temp screenshot dir."""
    values = dict(DEFAULT_SETTINGS)
    values["explicit.wait"] = "1"
    values["screenshot.path"] = str(tmp_path / "screenshots")
    return Settings.from_mapping(values)


@pytest.fixture
def page() -> MagicMock:
    page = MagicMock(spec=Page)
    page.url = "https://demoqa.com/"
    page.title.return_value = "DEMOQA"
    return page


@pytest.fixture
def context(page) -> MagicMock:
    context = MagicMock(spec=BrowserContext)
    context.pages = [page]
    return context


@pytest.fixture
def session(page, context) -> BrowserSession:
    """Browser session wired to mock Playwright objects."""
    return BrowserSession(
        kind=BrowserKind.CHROME,
        playwright=MagicMock(spec=Playwright),
        browser=MagicMock(spec=Browser),
        context=context,
        page=page,
    )


@pytest.fixture
def element(page) -> MagicMock:
    """The element every locator lookup on ``page`` resolves to."""
    return page.locator.return_value.first
