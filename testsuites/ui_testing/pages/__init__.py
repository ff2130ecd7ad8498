"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for storefront pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .home_page import HomePage

__all__ = [
    "HomePage",
]
