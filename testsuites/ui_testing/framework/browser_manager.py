"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Browser selection from settings (chrome, firefox, edge, safari)
    - Per-browser launch flags (headless, sandboxing, fixed viewport)
    - Session-wide implicit wait and page-load timeouts
    - Explicitly owned session object, one per manager

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional, Union

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Dialog,
    Error as PlaywrightError,
    Frame,
    Page,
    Playwright,
    sync_playwright,
)

from .settings import ConfigurationError, Settings, get_settings


# Fixed viewport used when the window is not maximized
DEFAULT_VIEWPORT: Dict[str, int] = {"width": 1920, "height": 1080}


class UnsupportedBrowserError(ConfigurationError):
    """Raised when browser.name is not one of the supported browsers."""

    def __init__(self, browser_name: str):
        self.browser_name = browser_name
        supported = ", ".join(kind.value for kind in BrowserKind)
        super().__init__(
            f"Unsupported browser: {browser_name!r} (supported: {supported})"
        )


def _chrome_args(headless: bool, maximize: bool) -> List[str]:
    args = [
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
        "--window-size=1920,1080",
        "--disable-extensions",
        "--disable-popup-blocking",
    ]
    if maximize:
        args.append("--start-maximized")
    return args


def _firefox_args(headless: bool, maximize: bool) -> List[str]:
    return ["--width=1920", "--height=1080"]


def _edge_args(headless: bool, maximize: bool) -> List[str]:
    args = [
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--window-size=1920,1080",
    ]
    if maximize:
        args.append("--start-maximized")
    return args


def _safari_args(headless: bool, maximize: bool) -> List[str]:
    return []


@dataclass(frozen=True)
class BrowserProfile:
    """
    How one supported browser is launched.

    Attributes:
        engine: Playwright browser type ('chromium', 'firefox', 'webkit')
        build_args: Builds command-line flags from (headless, maximize)
        channel: Installed browser channel, e.g. 'msedge'
    """
    engine: str
    build_args: Callable[[bool, bool], List[str]]
    channel: Optional[str] = None

    def launch_options(self, headless: bool, maximize: bool) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "headless": headless,
            "args": self.build_args(headless, maximize),
        }
        if self.channel:
            options["channel"] = self.channel
        return options


class BrowserKind(Enum):
    """Supported browsers."""
    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"
    SAFARI = "safari"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "BrowserKind":
        """Case-insensitive lookup; unknown names are a configuration error."""
        normalized = (name or "").strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise UnsupportedBrowserError(normalized)

    @property
    def profile(self) -> BrowserProfile:
        return BROWSER_PROFILES[self]


BROWSER_PROFILES: Dict[BrowserKind, BrowserProfile] = {
    BrowserKind.CHROME: BrowserProfile("chromium", _chrome_args),
    BrowserKind.FIREFOX: BrowserProfile("firefox", _firefox_args),
    BrowserKind.EDGE: BrowserProfile("chromium", _edge_args, channel="msedge"),
    BrowserKind.SAFARI: BrowserProfile("webkit", _safari_args),
}


@dataclass(frozen=True, eq=False)
class DialogPolicy:
    """How the next native dialog is answered when it opens."""
    accept: bool = True
    prompt_text: Optional[str] = None


# Applied when no policy was armed for a dialog
DEFAULT_DIALOG_POLICY = DialogPolicy(accept=True)


@dataclass(frozen=True)
class DialogRecord:
    """A native dialog that opened, and how it was answered."""
    type: str
    message: str
    accepted: bool
    prompt_text: Optional[str] = None


@dataclass(eq=False)
class BrowserSession:
    """
    A live browser session: the driver handle used by page objects.

    ``page`` is the window/tab currently in focus and ``frame`` the frame
    element lookups are scoped to (None for the top-level document).

    Page scripts block while a native dialog is open, so every dialog is
    answered the moment it opens: by the oldest policy armed in
    ``dialog_policies``, else by DEFAULT_DIALOG_POLICY. Answered dialogs are
    recorded in ``dialogs`` until a page object consumes them.
    """
    kind: BrowserKind
    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page
    headless: bool = False
    maximized: bool = False
    frame: Optional[Frame] = None
    dialogs: Deque[DialogRecord] = field(default_factory=deque)
    dialog_policies: Deque[DialogPolicy] = field(default_factory=deque)
    dialogs_seen: int = 0
    closed: bool = False

    def __post_init__(self) -> None:
        self.context.on("page", self._watch_page)
        for page in self.context.pages:
            self._watch_page(page)

    def _watch_page(self, page: Page) -> None:
        page.on("dialog", self._on_dialog)

    def _on_dialog(self, dialog: Dialog) -> None:
        policy = self.dialog_policies.popleft() if self.dialog_policies else DEFAULT_DIALOG_POLICY
        record = DialogRecord(
            type=dialog.type,
            message=dialog.message,
            accepted=policy.accept,
            prompt_text=policy.prompt_text if policy.accept else None,
        )
        try:
            if not policy.accept:
                dialog.dismiss()
            elif policy.prompt_text is None:
                dialog.accept()
            else:
                dialog.accept(policy.prompt_text)
        except PlaywrightError as e:
            logger.warning(f"Could not answer {dialog.type} '{dialog.message}': {e}")
        logger.debug(
            f"Dialog {'accepted' if record.accepted else 'dismissed'}: "
            f"{record.type} '{record.message}'"
        )
        self.dialogs.append(record)
        self.dialogs_seen += 1

    @property
    def scope(self) -> Union[Page, Frame]:
        """Frame or page that element lookups run against."""
        return self.frame if self.frame is not None else self.page

    @property
    def pages(self) -> List[Page]:
        """All open windows/tabs, in opening order."""
        return list(self.context.pages)

    def focus(self, page: Page) -> None:
        """Make ``page`` the current window and reset the frame scope."""
        self.page = page
        self.frame = None

    def close(self) -> None:
        """Close context, browser and the Playwright runtime."""
        if self.closed:
            return
        for closer in (self.context.close, self.browser.close, self.playwright.stop):
            try:
                closer()
            except PlaywrightError as e:
                logger.debug(f"Ignoring error during browser shutdown: {e}")
        self.dialogs.clear()
        self.dialog_policies.clear()
        self.closed = True
        logger.debug(f"Browser closed: {self.kind.value}")


class BrowserManager:
    """
    Creates and owns at most one BrowserSession.

    Usage:
        with BrowserManager() as manager:
            session = manager.initialize_driver()
            session.page.goto(manager.base_url)

        # Or explicitly, as in test setup/teardown
        manager = BrowserManager(Settings.load())
        session = manager.get_driver()
        ...
        manager.quit_driver()
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize browser manager.

        Args:
            settings: Settings to read browser options from.
                      Uses the process-wide settings if not specified.
        """
        self.settings = settings or get_settings()
        self._session: Optional[BrowserSession] = None

    def __enter__(self) -> "BrowserManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.quit_driver()

    def initialize_driver(self) -> BrowserSession:
        """
        Launch the configured browser and return a new session.

        Any session already held by this manager is quit first.

        Raises:
            UnsupportedBrowserError: browser.name is not supported
        """
        browser_name = self.settings.browser_name
        try:
            kind = BrowserKind.from_name(browser_name)
        except UnsupportedBrowserError:
            logger.error(f"Unsupported browser configured: {browser_name!r}")
            raise

        headless = self.settings.get_bool_property("browser.headless")
        maximize = self.settings.get_bool_property("browser.window.maximize")

        if self._session is not None:
            logger.debug("Replacing existing browser session")
            self.quit_driver()

        profile = kind.profile
        playwright = sync_playwright().start()
        try:
            launcher = getattr(playwright, profile.engine)
            browser = launcher.launch(**profile.launch_options(headless, maximize))

            if maximize:
                context = browser.new_context(no_viewport=True)
            else:
                context = browser.new_context(viewport=DEFAULT_VIEWPORT)

            implicit_wait = self.settings.implicit_wait
            if implicit_wait > 0:
                context.set_default_timeout(implicit_wait * 1000)
            page_load_timeout = self.settings.page_load_timeout
            if page_load_timeout > 0:
                context.set_default_navigation_timeout(page_load_timeout * 1000)

            page = context.new_page()
        except Exception:
            playwright.stop()
            raise

        self._session = BrowserSession(
            kind=kind,
            playwright=playwright,
            browser=browser,
            context=context,
            page=page,
            headless=headless,
            maximized=maximize,
        )
        logger.info(
            f"Browser started: {kind.value} "
            f"(headless={headless}, maximize={maximize})"
        )
        return self._session

    def get_driver(self) -> BrowserSession:
        """Return the current session, launching one if needed."""
        if self._session is None or self._session.closed:
            return self.initialize_driver()
        return self._session

    def quit_driver(self) -> None:
        """Close and discard the session; no-op when there is none."""
        if self._session is None:
            return
        session, self._session = self._session, None
        session.close()

    @property
    def session(self) -> Optional[BrowserSession]:
        """Current session, if any."""
        return self._session

    @property
    def base_url(self) -> Optional[str]:
        return self.settings.base_url

    @property
    def test_url(self) -> Optional[str]:
        return self.settings.test_url

    @property
    def explicit_wait(self) -> int:
        return self.settings.explicit_wait

    @property
    def implicit_wait(self) -> int:
        return self.settings.implicit_wait


__all__ = [
    "BROWSER_PROFILES",
    "BrowserKind",
    "BrowserManager",
    "BrowserProfile",
    "BrowserSession",
    "DEFAULT_DIALOG_POLICY",
    "DialogPolicy",
    "DialogRecord",
    "UnsupportedBrowserError",
]
