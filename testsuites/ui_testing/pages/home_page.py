"""
================================================================================
Home Page Object
================================================================================

Storefront home page: header navigation, search, featured products,
newsletter signup, social links and footer.

The page composes a BasePage rather than inheriting from it; every action
delegates to those primitives with this page's locators.

NOTE:
  Selectors follow the demo storefront's markup (class names, element ids,
  link texts). Tests break if that markup changes.

================================================================================
"""

from __future__ import annotations

from typing import Dict, List, Optional

import allure

from testsuites.ui_testing.framework.browser_manager import BrowserSession
from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.settings import Settings


class HomePage:
    """Home page object."""

    # Header
    LOGO = Locator.css(".logo")
    NAVIGATION_MENU = Locator.css(".navbar-nav")
    SEARCH_BOX = Locator.id("search")
    SEARCH_BUTTON = Locator.css(".search-button")
    CART_ICON = Locator.css(".cart-icon")
    USER_ICON = Locator.css(".user-icon")
    LOGIN_LINK = Locator.link_text("Login")
    REGISTER_LINK = Locator.link_text("Register")
    CONTACT_LINK = Locator.link_text("Contact")
    ABOUT_LINK = Locator.link_text("About")
    PRODUCTS_LINK = Locator.link_text("Products")
    CART_LINK = Locator.link_text("Cart")
    WISHLIST_LINK = Locator.link_text("Wishlist")
    FOOTER = Locator.css(".footer")
    COPYRIGHT = Locator.css(".copyright")

    # Featured products
    FEATURED_PRODUCTS = Locator.css(".featured-products")
    PRODUCT_CARDS = Locator.css(".product-card")
    ADD_TO_CART_BUTTON = Locator.css(".add-to-cart")
    ADD_TO_WISHLIST_BUTTON = Locator.css(".add-to-wishlist")

    # Newsletter
    NEWSLETTER_EMAIL = Locator.id("newsletter-email")
    NEWSLETTER_SUBSCRIBE_BUTTON = Locator.id("newsletter-subscribe")
    NEWSLETTER_SUCCESS_MESSAGE = Locator.css(".newsletter-success")

    # Social media
    FACEBOOK_LINK = Locator.css(".social-facebook")
    TWITTER_LINK = Locator.css(".social-twitter")
    INSTAGRAM_LINK = Locator.css(".social-instagram")
    LINKEDIN_LINK = Locator.css(".social-linkedin")

    SOCIAL_LINKS: Dict[str, Locator] = {
        "facebook": FACEBOOK_LINK,
        "twitter": TWITTER_LINK,
        "instagram": INSTAGRAM_LINK,
        "linkedin": LINKEDIN_LINK,
    }

    def __init__(
        self,
        session: BrowserSession,
        settings: Optional[Settings] = None,
        actions: Optional[BasePage] = None,
    ):
        """
        Initialize home page.

        Args:
            session: Live browser session
            settings: Settings for URLs and waits
            actions: Pre-built primitives to use instead of a new BasePage
        """
        self.actions = actions or BasePage(session, settings)
        self.settings = self.actions.settings

    @allure.step("Open home page")
    def navigate_to_home_page(self) -> "HomePage":
        self.actions.navigate_to(self.settings.base_url)
        return self

    def wait_for_page_load(self) -> None:
        """Wait until the logo and navigation menu are visible."""
        self.actions.wait_for_element_visible(self.LOGO)
        self.actions.wait_for_element_visible(self.NAVIGATION_MENU)

    def get_home_page_title(self) -> str:
        return self.actions.get_page_title()

    def get_current_url(self) -> str:
        return self.actions.get_current_url()

    # =========================================================================
    # Header
    # =========================================================================

    def is_logo_displayed(self) -> bool:
        return self.actions.is_element_displayed(self.LOGO)

    def get_logo_text(self) -> str:
        return self.actions.get_text(self.LOGO)

    @allure.step("Search for product: {product_name}")
    def search_product(self, product_name: str) -> None:
        self.actions.send_keys(self.SEARCH_BOX, product_name)
        self.actions.click(self.SEARCH_BUTTON)

    def get_search_box_placeholder(self) -> Optional[str]:
        return self.actions.get_attribute(self.SEARCH_BOX, "placeholder")

    @allure.step("Click cart icon")
    def click_cart_icon(self) -> None:
        self.actions.click(self.CART_ICON)

    @allure.step("Click user icon")
    def click_user_icon(self) -> None:
        self.actions.click(self.USER_ICON)

    def click_login_link(self) -> None:
        self.actions.click(self.LOGIN_LINK)

    def click_register_link(self) -> None:
        self.actions.click(self.REGISTER_LINK)

    def click_contact_link(self) -> None:
        self.actions.click(self.CONTACT_LINK)

    def click_about_link(self) -> None:
        self.actions.click(self.ABOUT_LINK)

    def click_products_link(self) -> None:
        self.actions.click(self.PRODUCTS_LINK)

    def click_cart_link(self) -> None:
        self.actions.click(self.CART_LINK)

    def click_wishlist_link(self) -> None:
        self.actions.click(self.WISHLIST_LINK)

    def is_navigation_menu_displayed(self) -> bool:
        return self.actions.is_element_displayed(self.NAVIGATION_MENU)

    def get_navigation_menu_text(self) -> str:
        return self.actions.get_text(self.NAVIGATION_MENU)

    @allure.step("Verify login and register links are displayed")
    def are_authentication_links_displayed(self) -> bool:
        return (
            self.actions.is_element_displayed(self.LOGIN_LINK)
            and self.actions.is_element_displayed(self.REGISTER_LINK)
        )

    # =========================================================================
    # Featured Products
    # =========================================================================

    def is_featured_products_displayed(self) -> bool:
        return self.actions.is_element_displayed(self.FEATURED_PRODUCTS)

    def get_product_cards_count(self) -> int:
        return self.actions.count_elements(self.PRODUCT_CARDS)

    @allure.step("Add first product to cart")
    def click_first_product_add_to_cart(self) -> None:
        self.actions.click(self.ADD_TO_CART_BUTTON)

    @allure.step("Add first product to wishlist")
    def click_first_product_add_to_wishlist(self) -> None:
        self.actions.click(self.ADD_TO_WISHLIST_BUTTON)

    def scroll_to_featured_products(self) -> None:
        self.actions.scroll_to_element(self.FEATURED_PRODUCTS)

    # =========================================================================
    # Newsletter
    # =========================================================================

    @allure.step("Subscribe to newsletter: {email}")
    def subscribe_to_newsletter(self, email: str) -> None:
        self.actions.send_keys(self.NEWSLETTER_EMAIL, email)
        self.actions.click(self.NEWSLETTER_SUBSCRIBE_BUTTON)

    def is_newsletter_success_message_displayed(self) -> bool:
        return self.actions.is_element_displayed(self.NEWSLETTER_SUCCESS_MESSAGE)

    def get_newsletter_success_message(self) -> str:
        return self.actions.get_text(self.NEWSLETTER_SUCCESS_MESSAGE)

    # =========================================================================
    # Social Media
    # =========================================================================

    def click_facebook_link(self) -> None:
        self.actions.click(self.FACEBOOK_LINK)

    def click_twitter_link(self) -> None:
        self.actions.click(self.TWITTER_LINK)

    def click_instagram_link(self) -> None:
        self.actions.click(self.INSTAGRAM_LINK)

    def click_linkedin_link(self) -> None:
        self.actions.click(self.LINKEDIN_LINK)

    def get_displayed_social_links(self) -> List[str]:
        """Names of the social networks whose links are visible."""
        return [
            network
            for network, locator in self.SOCIAL_LINKS.items()
            if self.actions.is_element_displayed(locator)
        ]

    # =========================================================================
    # Footer
    # =========================================================================

    def is_footer_displayed(self) -> bool:
        return self.actions.is_element_displayed(self.FOOTER)

    def get_footer_text(self) -> str:
        return self.actions.get_text(self.FOOTER)

    def get_copyright_text(self) -> str:
        return self.actions.get_text(self.COPYRIGHT)

    @allure.step("Scroll to footer")
    def scroll_to_footer(self) -> None:
        self.actions.scroll_to_element(self.FOOTER)
