"""
================================================================================
Allure Report Utilities
================================================================================

This module provides helpers for attaching UI test evidence to Allure
reports.

Features:
- Text / JSON / PNG attachment helpers
- Page state capture (URL, title, full-page screenshot) for failed tests

================================================================================
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(image: Union[bytes, str, Path], name: str = "Screenshot"):
    """
    Attach a PNG image to Allure report.

    Args:
        image: PNG bytes or path to a PNG file
        name: Attachment name
    """
    if isinstance(image, (str, Path)):
        image = Path(image).read_bytes()
    allure.attach(
        image,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


# ================================================================================
# Page State Capture
# ================================================================================

def attach_page_state(session: Optional[Any], name: str = "page_state") -> bool:
    """
    Attach the current URL, title and a full-page screenshot of a session.

    Best-effort: a missing or already-closed session attaches nothing.

    Args:
        session: BrowserSession (or None)
        name: Attachment name prefix

    Returns:
        True if the state was attached
    """
    if session is None or getattr(session, "closed", False):
        return False

    page = session.page
    try:
        with allure.step(f"Capture page state: {name}"):
            attach_text(page.url, name=f"{name}_url")
            attach_text(page.title(), name=f"{name}_title")
            attach_png(page.screenshot(full_page=True), name=f"{name}_screenshot")
    except PlaywrightError as e:
        logger.warning(f"Failed to capture page state '{name}': {e}")
        return False
    return True


__all__ = [
    "attach_json",
    "attach_page_state",
    "attach_png",
    "attach_text",
]
