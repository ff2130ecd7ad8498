"""
================================================================================
Locator
================================================================================

Immutable (strategy, value) pairs identifying page elements, rendered to
Playwright selector strings.

Page Objects declare their locators as class-level constants:

    LOGO = Locator.css(".logo")
    SEARCH_BOX = Locator.id("search")
    LOGIN_LINK = Locator.link_text("Login")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    """How a locator value is interpreted."""
    CSS = "css"
    ID = "id"
    NAME = "name"
    LINK_TEXT = "link_text"
    PARTIAL_LINK_TEXT = "partial_link_text"
    XPATH = "xpath"


@dataclass(frozen=True)
class Locator:
    """
    Element locator.

    Attributes:
        strategy: Lookup strategy
        value: Strategy-specific value (selector, id, link text, ...)
    """
    strategy: Strategy
    value: str

    @classmethod
    def css(cls, selector: str) -> "Locator":
        return cls(Strategy.CSS, selector)

    @classmethod
    def id(cls, element_id: str) -> "Locator":
        return cls(Strategy.ID, element_id)

    @classmethod
    def name(cls, name: str) -> "Locator":
        return cls(Strategy.NAME, name)

    @classmethod
    def link_text(cls, text: str) -> "Locator":
        return cls(Strategy.LINK_TEXT, text)

    @classmethod
    def partial_link_text(cls, text: str) -> "Locator":
        return cls(Strategy.PARTIAL_LINK_TEXT, text)

    @classmethod
    def xpath(cls, expression: str) -> "Locator":
        return cls(Strategy.XPATH, expression)

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        # json.dumps gives a double-quoted, escaped string literal
        quoted = json.dumps(self.value)
        if self.strategy is Strategy.CSS:
            return self.value
        if self.strategy is Strategy.ID:
            return f"[id={quoted}]"
        if self.strategy is Strategy.NAME:
            return f"[name={quoted}]"
        if self.strategy is Strategy.LINK_TEXT:
            return f"a:text-is({quoted})"
        if self.strategy is Strategy.PARTIAL_LINK_TEXT:
            return f"a:has-text({quoted})"
        return f"xpath={self.value}"

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.value}"


__all__ = [
    "Locator",
    "Strategy",
]
