"""
================================================================================
Base Page
================================================================================

Generic element-interaction primitives shared by all page objects.

Page objects hold a BasePage (composition) instead of inheriting from it:

    class LoginPage:
        USERNAME = Locator.id("username")

        def __init__(self, session, settings=None):
            self.actions = BasePage(session, settings)

        def login(self, username):
            self.actions.send_keys(self.USERNAME, username)

Provides:
    - Navigation and page state
    - Explicit waits (present, visible, clickable)
    - Click, text entry, attribute and state queries
    - Dropdown selection
    - Frame and window switching
    - Scrolling
    - Native alert/confirm/prompt handling
    - Mouse gestures
    - Full-page screenshots

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

import allure
from loguru import logger
from playwright.sync_api import (
    Error as PlaywrightError,
    Frame,
    Locator as PlaywrightLocator,
    Page,
    TimeoutError as PlaywrightTimeoutError,
)

from .browser_manager import BrowserSession, DialogPolicy, DialogRecord
from .locator import Locator
from .results import SoftResult
from .settings import Settings, get_settings


# Used when explicit.wait is missing or not a positive number
DEFAULT_EXPLICIT_WAIT = 20

CLICKABLE_JS = "el => !el.disabled && el.getAttribute('aria-disabled') !== 'true'"
SELECTED_JS = "el => Boolean(el.checked || el.selected)"
READY_STATE_JS = "() => document.readyState === 'complete'"


class NoSuchFrameError(Exception):
    """Raised when a frame cannot be found in the current scope."""
    pass


class NoSuchWindowError(Exception):
    """Raised when no window matches a switch request."""
    pass


class NoAlertPresentError(Exception):
    """Raised when no dialog record is available after waiting."""
    pass


class AlertHandlingError(Exception):
    """Raised when a dialog was answered differently than the caller expects."""
    pass


class ElementNotInteractableError(Exception):
    """Raised when a pointer gesture targets an element without a layout box."""
    pass


class BasePage:
    """
    Interaction primitives bound to one BrowserSession.

    Every call blocks until the browser responds or the explicit wait
    (``explicit.wait`` seconds) elapses. Playwright errors propagate to the
    caller except where noted (``is_element_displayed``, ``take_screenshot``).
    """

    def __init__(
        self,
        session: BrowserSession,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize base page.

        Args:
            session: Live browser session
            settings: Settings for waits and screenshot location.
                      Uses the process-wide settings if not specified.
        """
        self.session = session
        self.settings = settings or get_settings()

        explicit_wait = self.settings.explicit_wait
        if explicit_wait <= 0:
            explicit_wait = DEFAULT_EXPLICIT_WAIT
        self.explicit_wait_ms = explicit_wait * 1000

    @property
    def page(self) -> Page:
        """Window/tab currently in focus."""
        return self.session.page

    @property
    def scope(self) -> Union[Page, Frame]:
        """Frame or page element lookups run against."""
        return self.session.scope

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate_to(self, url: str) -> None:
        with allure.step(f"Navigate to {url}"):
            self.page.goto(url)
            logger.debug(f"Navigated to: {url}")

    def get_page_title(self) -> str:
        return self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    def wait_for_page_load(self) -> None:
        """Wait until document.readyState is 'complete'."""
        self.page.wait_for_function(READY_STATE_JS, timeout=self.explicit_wait_ms)

    # =========================================================================
    # Element Lookup and Waits
    # =========================================================================

    def _find(self, locator: Locator) -> PlaywrightLocator:
        return self.scope.locator(locator.selector).first

    def find_elements(self, locator: Locator) -> List[PlaywrightLocator]:
        """All elements currently matching the locator (no waiting)."""
        return self.scope.locator(locator.selector).all()

    def count_elements(self, locator: Locator) -> int:
        return self.scope.locator(locator.selector).count()

    def wait_for_element_present(self, locator: Locator) -> PlaywrightLocator:
        """Wait for the element to be attached to the document."""
        element = self._find(locator)
        element.wait_for(state="attached", timeout=self.explicit_wait_ms)
        return element

    def wait_for_element_visible(self, locator: Locator) -> PlaywrightLocator:
        """Wait for the element to be visible."""
        element = self._find(locator)
        element.wait_for(state="visible", timeout=self.explicit_wait_ms)
        return element

    def wait_for_element_clickable(self, locator: Locator) -> PlaywrightLocator:
        """Wait for the element to be visible and enabled."""
        element = self.wait_for_element_visible(locator)
        self.scope.wait_for_function(
            CLICKABLE_JS,
            arg=element.element_handle(timeout=self.explicit_wait_ms),
            timeout=self.explicit_wait_ms,
        )
        return element

    # =========================================================================
    # Element Interactions
    # =========================================================================

    @allure.step("Click: {locator}")
    def click(self, locator: Locator) -> None:
        logger.info(f"Clicking element: {locator}")
        self.wait_for_element_clickable(locator).click()

    @allure.step("Click with script: {locator}")
    def click_with_js(self, locator: Locator) -> None:
        """Click through an in-page script, bypassing actionability checks."""
        logger.info(f"Clicking element via script: {locator}")
        self.wait_for_element_visible(locator).evaluate("el => el.click()")

    @allure.step("Type into {locator}")
    def send_keys(self, locator: Locator, text: str) -> None:
        """Clear the field, then enter text."""
        logger.info(f"Filling input: {locator} with '{text[:50]}'")
        element = self.wait_for_element_visible(locator)
        element.clear()
        element.fill(text)

    def get_text(self, locator: Locator) -> str:
        text = self.wait_for_element_visible(locator).inner_text()
        logger.debug(f"Got text from {locator}: '{text}'")
        return text

    def get_attribute(self, locator: Locator, attribute_name: str) -> Optional[str]:
        value = self.wait_for_element_visible(locator).get_attribute(attribute_name)
        logger.debug(f"Got attribute {attribute_name} from {locator}: '{value}'")
        return value

    def is_element_displayed(self, locator: Locator) -> bool:
        """Visible within the explicit wait; a timeout reports False."""
        try:
            return self.wait_for_element_visible(locator).is_visible()
        except PlaywrightTimeoutError:
            logger.debug(f"Element not displayed: {locator}")
            return False

    def is_element_enabled(self, locator: Locator) -> bool:
        return self.wait_for_element_visible(locator).is_enabled()

    def is_element_selected(self, locator: Locator) -> bool:
        """Checked state of a checkbox/radio, or selected state of an option."""
        return self.wait_for_element_visible(locator).evaluate(SELECTED_JS)

    # =========================================================================
    # Dropdowns
    # =========================================================================

    @allure.step("Select '{visible_text}' in {locator}")
    def select_by_visible_text(self, locator: Locator, visible_text: str) -> None:
        self.wait_for_element_visible(locator).select_option(label=visible_text)

    @allure.step("Select value '{value}' in {locator}")
    def select_by_value(self, locator: Locator, value: str) -> None:
        self.wait_for_element_visible(locator).select_option(value=value)

    @allure.step("Select index {index} in {locator}")
    def select_by_index(self, locator: Locator, index: int) -> None:
        self.wait_for_element_visible(locator).select_option(index=index)

    def get_dropdown_options(self, locator: Locator) -> List[PlaywrightLocator]:
        return self.wait_for_element_visible(locator).locator("option").all()

    # =========================================================================
    # Frames and Windows
    # =========================================================================

    def _child_frames(self) -> List[Frame]:
        scope = self.scope
        if isinstance(scope, Frame):
            return list(scope.child_frames)
        return list(scope.main_frame.child_frames)

    def switch_to_frame(self, target: Union[int, str, Locator]) -> None:
        """
        Scope element lookups to a child frame.

        Args:
            target: Frame index, frame name/id, or locator of the frame element
        """
        if isinstance(target, Locator):
            handle = self.wait_for_element_visible(target).element_handle()
            frame = handle.content_frame()
        elif isinstance(target, int):
            frames = self._child_frames()
            frame = frames[target] if 0 <= target < len(frames) else None
        else:
            frame = self._frame_by_name_or_id(target)

        if frame is None:
            raise NoSuchFrameError(f"No frame found for: {target}")
        self.session.frame = frame
        logger.debug(f"Switched to frame: {target}")

    def _frame_by_name_or_id(self, name_or_id: str) -> Optional[Frame]:
        for frame in self._child_frames():
            if frame.name == name_or_id:
                return frame
        by_id = Locator.id(name_or_id).selector
        elements = self.scope.locator(f"iframe{by_id}, frame{by_id}")
        if elements.count() == 0:
            return None
        return elements.first.element_handle().content_frame()

    def switch_to_default_content(self) -> None:
        """Return element lookups to the top-level document."""
        self.session.frame = None

    def switch_to_new_window(self) -> None:
        """Focus the first open window that is not the current one."""
        current = self.page
        for page in self.session.pages:
            if page is not current:
                self.session.focus(page)
                page.bring_to_front()
                logger.debug(f"Switched to window: {page.url}")
                return
        raise NoSuchWindowError("No other window is open")

    def switch_to_window_by_title(self, title: str) -> None:
        """Focus the window whose title equals ``title``."""
        for page in self.session.pages:
            if page.title() == title:
                self.session.focus(page)
                page.bring_to_front()
                logger.debug(f"Switched to window: {title}")
                return
        raise NoSuchWindowError(f"No window titled: {title}")

    def close_current_window(self) -> None:
        """Close the current window and focus any remaining one."""
        self.page.close()
        remaining = self.session.pages
        if remaining:
            self.session.focus(remaining[0])

    # =========================================================================
    # Scrolling
    # =========================================================================

    def scroll_to_element(self, locator: Locator) -> None:
        self.wait_for_element_visible(locator).evaluate("el => el.scrollIntoView(true)")

    def scroll_to_top(self) -> None:
        self.scope.evaluate("window.scrollTo(0, 0)")

    def scroll_to_bottom(self) -> None:
        self.scope.evaluate("window.scrollTo(0, document.body.scrollHeight)")

    # =========================================================================
    # Alerts
    # =========================================================================
    #
    # A page blocks while a native dialog is open, so the session answers each
    # dialog as soon as it opens (accepting it unless told otherwise). Wrap the
    # triggering action in expect_alert() to choose the answer; the methods
    # below then read and consume the recorded dialogs, oldest first.

    @contextmanager
    def expect_alert(
        self,
        accept: bool = True,
        prompt_text: Optional[str] = None,
    ) -> Iterator[None]:
        """
        Answer the next dialog as given; the block must raise it.

        Usage:
            with page.actions.expect_alert(accept=False):
                page.actions.click(DELETE_BUTTON)
            page.actions.dismiss_alert()

        Raises:
            PlaywrightTimeoutError: No dialog opened within the explicit wait
        """
        policy = DialogPolicy(accept=accept, prompt_text=prompt_text)
        session = self.session
        seen_before = session.dialogs_seen
        session.dialog_policies.append(policy)
        try:
            yield
            if session.dialogs_seen == seen_before:
                self.page.wait_for_event("dialog", timeout=self.explicit_wait_ms)
        finally:
            if policy in session.dialog_policies:
                session.dialog_policies.remove(policy)

    def _wait_for_alert(self) -> DialogRecord:
        dialogs = self.session.dialogs
        if not dialogs:
            self.page.wait_for_event("dialog", timeout=self.explicit_wait_ms)
        if not dialogs:
            raise NoAlertPresentError("Dialog opened on a window this session does not watch")
        return dialogs[0]

    @allure.step("Accept alert")
    def accept_alert(self) -> None:
        """Consume the pending dialog, which must have been accepted."""
        record = self._wait_for_alert()
        self.session.dialogs.popleft()
        if record.type != "alert" and not record.accepted:
            raise AlertHandlingError(
                f"{record.type} '{record.message}' was dismissed when it opened; "
                f"trigger it inside expect_alert(accept=True)"
            )

    @allure.step("Dismiss alert")
    def dismiss_alert(self) -> None:
        """Consume the pending dialog, which must have been dismissed."""
        record = self._wait_for_alert()
        self.session.dialogs.popleft()
        if record.type != "alert" and record.accepted:
            raise AlertHandlingError(
                f"{record.type} '{record.message}' was accepted when it opened; "
                f"trigger it inside expect_alert(accept=False)"
            )

    def get_alert_text(self) -> str:
        """Message of the pending dialog (not consumed)."""
        return self._wait_for_alert().message

    def send_keys_to_alert(self, text: str) -> None:
        """Check the pending prompt was answered with ``text`` (not consumed)."""
        record = self._wait_for_alert()
        if record.prompt_text != text:
            raise AlertHandlingError(
                f"{record.type} '{record.message}' was answered with "
                f"{record.prompt_text!r}; trigger it inside expect_alert(prompt_text={text!r})"
            )

    # =========================================================================
    # Mouse Gestures
    # =========================================================================

    def _center_of(self, locator: Locator) -> Dict[str, float]:
        element = self.wait_for_element_visible(locator)
        element.scroll_into_view_if_needed()
        box = element.bounding_box()
        if box is None:
            raise ElementNotInteractableError(f"Element has no layout box: {locator}")
        return {
            "x": box["x"] + box["width"] / 2,
            "y": box["y"] + box["height"] / 2,
        }

    @allure.step("Double click: {locator}")
    def double_click(self, locator: Locator) -> None:
        point = self._center_of(locator)
        self.page.mouse.dblclick(point["x"], point["y"])

    @allure.step("Right click: {locator}")
    def right_click(self, locator: Locator) -> None:
        point = self._center_of(locator)
        self.page.mouse.click(point["x"], point["y"], button="right")

    @allure.step("Hover: {locator}")
    def hover_over_element(self, locator: Locator) -> None:
        point = self._center_of(locator)
        self.page.mouse.move(point["x"], point["y"])

    @allure.step("Drag and drop: {source_locator} -> {target_locator}")
    def drag_and_drop(self, source_locator: Locator, target_locator: Locator) -> None:
        logger.info(f"Dragging from {source_locator} to {target_locator}")
        source = self._center_of(source_locator)
        target = self._center_of(target_locator)
        mouse = self.page.mouse
        mouse.move(source["x"], source["y"])
        mouse.down()
        mouse.move(target["x"], target["y"], steps=10)
        mouse.up()

    # =========================================================================
    # Screenshots
    # =========================================================================

    def take_screenshot(
        self,
        file_name: str,
        attach_to_allure: bool = True,
    ) -> SoftResult:
        """
        Capture a full-page PNG to ``<screenshot.path>/<file_name>.png``.

        Failures are logged and returned as a degraded result, never raised.

        Args:
            file_name: File name without extension
            attach_to_allure: Whether to attach the image to the Allure report

        Returns:
            SoftResult whose value is the target path
        """
        directory = Path(self.settings.screenshot_path)
        filepath = directory / f"{file_name}.png"
        try:
            directory.mkdir(parents=True, exist_ok=True)
            image = self.page.screenshot(path=str(filepath), full_page=True)
        except (OSError, PlaywrightError) as e:
            logger.error(f"Failed to take screenshot {filepath}: {e}")
            return SoftResult.degraded(str(e), value=filepath)

        if attach_to_allure:
            allure.attach(
                image,
                name=file_name,
                attachment_type=allure.attachment_type.PNG,
            )
        logger.debug(f"Screenshot saved: {filepath}")
        return SoftResult.success(filepath)


__all__ = [
    "AlertHandlingError",
    "BasePage",
    "ElementNotInteractableError",
    "NoAlertPresentError",
    "NoSuchFrameError",
    "NoSuchWindowError",
]
