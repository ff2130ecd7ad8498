"""
================================================================================
Autotest Tools
================================================================================

Shared infrastructure for the UI test suites.

Modules:
    - common: Logging setup and filesystem helpers
    - report_tools: Allure attachment helpers

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools.allure_utils import attach_page_state

    init_logger(level="DEBUG")
    attach_page_state(session, name="after_login")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
