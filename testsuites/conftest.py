"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and gates live browser tests.

================================================================================
"""

from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live storefront"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI tests that drive a real browser"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework code"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "search: Tests related to product search"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart"
    )
    config.addinivalue_line(
        "markers", "newsletter: Tests related to newsletter signup"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds domain markers by directory and skips live UI tests unless
    ``--run-ui`` was given.
    """
    run_ui = config.getoption("--run-ui", default=False)
    skip_ui = pytest.mark.skip(reason="live UI test: pass --run-ui to run")

    for item in items:
        parts = Path(str(item.fspath)).parts

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Storefront UI Automation Suite",
        "=" * 60,
        "",
    ]
