"""
Page interactions run before extraction: cookie banners and reviews tabs.
"""

import logging

from selenium.common.exceptions import WebDriverException

from ..config import COOKIE_SELECTORS, REVIEW_TAB_SELECTORS, SCRAPER_SETTINGS
from .driver_utils import find_by_locator, random_delay, scroll_into_view, scroll_to_fraction

logger = logging.getLogger(__name__)


def handle_cookie_notices(driver, pause=random_delay):
    """
    Click the first cookie consent button found on the page.

    Returns:
        bool: True if a consent button was present
    """
    try:
        for locator in COOKIE_SELECTORS:
            buttons = find_by_locator(driver, locator)
            if not buttons:
                continue
            try:
                buttons[0].click()
            except WebDriverException as e:
                logger.debug("Cookie button %s not clickable: %s", locator[1], e)
            pause(*SCRAPER_SETTINGS["cookie_delay"])
            return True
        return False
    except WebDriverException as e:
        logger.warning("Error handling cookie notices: %s", e)
        return False


def open_reviews_section(driver, pause=random_delay):
    """
    Bring the reviews section into view.

    Clicks the first reviews tab/link found. Without one, scrolls to where
    reviews usually are (70% of the page height).

    Returns:
        bool: True if a reviews tab was found
    """
    try:
        for locator in REVIEW_TAB_SELECTORS:
            tabs = find_by_locator(driver, locator)
            if not tabs:
                continue

            scroll_into_view(driver, tabs[0])
            pause(*SCRAPER_SETTINGS["section_scroll_delay"])
            try:
                tabs[0].click()
            except WebDriverException as e:
                logger.debug("Reviews tab %s not clickable: %s", locator[1], e)
            pause(*SCRAPER_SETTINGS["section_click_delay"])
            return True

        scroll_to_fraction(driver, 0.7)
        pause(*SCRAPER_SETTINGS["section_fallback_delay"])
        return False

    except WebDriverException as e:
        logger.warning("Error finding reviews section: %s", e)
        return False
