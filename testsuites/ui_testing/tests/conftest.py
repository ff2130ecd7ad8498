"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for live UI tests, providing fixtures for
browser management, page objects, and test setup/teardown.

Key Features:
- One browser session per test (setup launches, teardown always quits)
- Page Object fixtures
- Page state capture on failure

================================================================================
"""

from typing import Generator

import pytest
from loguru import logger

from autotest_tools.report_tools.allure_utils import attach_json, attach_page_state
from testsuites.ui_testing.framework.browser_manager import BrowserManager, BrowserSession
from testsuites.ui_testing.framework.settings import Settings, get_settings
from testsuites.ui_testing.pages.home_page import HomePage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Process-wide suite settings."""
    return get_settings()


@pytest.fixture(scope="function")
def browser_manager(settings: Settings) -> Generator[BrowserManager, None, None]:
    """
    Function-scoped browser manager fixture.

    Teardown quits the browser unconditionally; quitting is a no-op when
    setup failed before a session existed.
    """
    manager = BrowserManager(settings)
    yield manager
    manager.quit_driver()


@pytest.fixture(scope="function")
def session(browser_manager: BrowserManager) -> BrowserSession:
    """Fresh browser session for each test."""
    return browser_manager.initialize_driver()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(session: BrowserSession, settings: Settings) -> HomePage:
    """
    Provides HomePage opened at base.url.
    """
    return HomePage(session, settings).navigate_to_home_page()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture page state on test failure.

    Attaches URL, title and a full-page screenshot to the Allure report
    while the browser session is still open, plus the settings in effect.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = getattr(item, "funcargs", {}).get("session")
        if session is not None:
            logger.info(f"Capturing page state for failed test: {item.name}")
            attach_page_state(session, name=f"failure_{item.name}")
        settings = getattr(item, "funcargs", {}).get("settings") or get_settings()
        attach_json(settings.as_dict(), name=f"failure_{item.name}_settings")


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    return {
        "search_term": "laptop",
        "newsletter_email": "test@example.com",
        "max_load_time_ms": 5000,
    }
