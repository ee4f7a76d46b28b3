"""
Content expansion - click "load more" affordances until no more are
visible or the round limit is reached.

Extraction only sees reviews that are already rendered, so this runs
before any field is read. Each round clicks at most one affordance: the
first candidate that is present and fully inside the viewport. An
off-screen match is never clicked, and a round without a click ends the
loop.
"""

import logging

from selenium.common.exceptions import WebDriverException

from .config import LOAD_MORE_SELECTORS, SCRAPER_SETTINGS
from .models import ExpansionResult
from .utils.driver_utils import (
    find_by_locator,
    is_in_viewport,
    random_delay,
    scroll_into_view,
)

_logger = logging.getLogger(__name__)


def _click_first_visible(driver, selectors, pause, log):
    """Click the first present, in-viewport affordance. Returns True if a click succeeded."""
    for locator in selectors:
        try:
            elements = find_by_locator(driver, locator)
            if not elements or not is_in_viewport(driver, elements[0]):
                continue

            button = elements[0]
            scroll_into_view(driver, button)
            pause(*SCRAPER_SETTINGS["before_click_delay"])
            button.click()
        except WebDriverException as e:
            log.warning('Could not click "%s": %s', locator[1], e)
            continue

        # Longer delay to allow content to load
        pause(*SCRAPER_SETTINGS["after_load_more_delay"])
        return True

    return False


def expand_content(driver, locate_nodes=None, pause=random_delay,
                   selectors=None, max_rounds=None, logger=None):
    """
    Reveal hidden reviews by repeatedly clicking "load more" buttons.

    Args:
        driver: Selenium WebDriver instance on the product page
        locate_nodes: Callable(driver) -> (selector, nodes) run once after expansion
        pause: Callable(min_seconds, max_seconds) run after every interaction
        selectors: Ordered ("css" | "xpath", value) locators (default: LOAD_MORE_SELECTORS)
        max_rounds: Round limit (default: SCRAPER_SETTINGS["max_expansion_rounds"])
        logger: Logger for warnings (default: module logger)

    Returns:
        ExpansionResult: whether anything was clicked, click/round counts and
        the review nodes located after expansion
    """
    log = logger or _logger
    selectors = LOAD_MORE_SELECTORS if selectors is None else selectors
    if max_rounds is None:
        max_rounds = SCRAPER_SETTINGS["max_expansion_rounds"]

    clicks = 0
    rounds = 0
    try:
        while rounds < max_rounds:
            rounds += 1
            if not _click_first_visible(driver, selectors, pause, log):
                break
            clicks += 1
    except Exception as e:
        # Keep what was revealed so far; node location still runs
        log.warning("Expansion stopped after %d round(s): %s", rounds, e)

    if clicks:
        log.info("Clicked load more %d time(s) in %d round(s)", clicks, rounds)

    result = ExpansionResult(expanded=clicks > 0, clicks=clicks, rounds=rounds)

    if locate_nodes is not None:
        selector, nodes = locate_nodes(driver)
        result.nodes = list(nodes)
        result.container_selector = selector

    return result
