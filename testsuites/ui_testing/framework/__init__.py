"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework (synchronous API).

Components:
    - settings: YAML settings with environment overrides and defaults
    - browser_manager: Browser selection, launch and session lifecycle
    - locator: Immutable element locators
    - page_base: Element-interaction primitives composed by page objects
    - results: Soft success/degraded outcomes

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import (
    BrowserKind,
    BrowserManager,
    BrowserSession,
    DialogPolicy,
    DialogRecord,
    UnsupportedBrowserError,
)
from .locator import Locator
from .page_base import (
    AlertHandlingError,
    BasePage,
    NoAlertPresentError,
    NoSuchFrameError,
    NoSuchWindowError,
)
from .results import SoftResult
from .settings import ConfigurationError, Settings, get_settings

__all__ = [
    "AlertHandlingError",
    "BasePage",
    "BrowserKind",
    "BrowserManager",
    "BrowserSession",
    "ConfigurationError",
    "DialogPolicy",
    "DialogRecord",
    "Locator",
    "NoAlertPresentError",
    "NoSuchFrameError",
    "NoSuchWindowError",
    "Settings",
    "SoftResult",
    "UnsupportedBrowserError",
    "get_settings",
]
