"""
Extraction strategies - one per known site plus a generic fallback.

A strategy is configuration (the selector tables in config.py) plus a
small amount of site-specific behavior: how to read the rating, what to
click before extraction, and whether to filter records. All of them share
the cascade engine and field parsers in extractors/.
"""

import logging
import re
from urllib.parse import urlparse

from selenium.webdriver.common.by import By
from selenium.common.exceptions import WebDriverException

from .config import (
    AMAZON_SELECTORS,
    WALMART_SELECTORS,
    BESTBUY_SELECTORS,
    GENERIC_SELECTORS,
    NOT_AVAILABLE,
    SCRAPER_SETTINGS,
)
from .extractors import (
    all_matches,
    first_match,
    first_text,
    parse_rating,
    parse_title,
    parse_date,
    parse_text,
    parse_verified,
    admit_generic,
)
from .models import ReviewRecord
from .utils.driver_utils import (
    find_by_locator,
    safe_get_attribute,
    safe_get_text_content,
    scroll_incrementally,
)

_logger = logging.getLogger(__name__)


# =============================================================================
# RATING READERS - rating element -> rating string (or None)
# =============================================================================

def rating_first_word(element):
    """Amazon: "4.0 out of 5 stars" -> "4.0"."""
    return safe_get_text_content(element).split(" ")[0] or None


def rating_aria_label_without_stars(element):
    """Walmart: aria-label "4 stars" -> "4"."""
    label = safe_get_attribute(element, "aria-label")
    if label is None:
        return None
    return label.replace("stars", "").strip() or None


def rating_aria_label_digits(element):
    """Best Buy: keep only digits and dots of the aria-label ("4.5 Stars" -> "4.5")."""
    label = safe_get_attribute(element, "aria-label")
    if label is None:
        return None
    return re.sub(r"[^0-9.]", "", label) or None


# =============================================================================
# PREPARE STEPS - run once before expansion
# =============================================================================

def expand_read_more(driver, pause, log):
    """Amazon: expand every truncated review body."""
    for button in driver.find_elements(By.CSS_SELECTOR, AMAZON_SELECTORS["read_more"]):
        try:
            button.click()
        except WebDriverException as e:
            log.debug("Ignoring read-more click error: %s", e)
            continue
        pause(*SCRAPER_SETTINGS["read_more_delay"])


def _open_reviews_tab(driver, locator, pause, log):
    buttons = find_by_locator(driver, locator)
    if buttons:
        try:
            buttons[0].click()
        except WebDriverException as e:
            log.warning("Could not open reviews tab: %s", e)
    pause(*SCRAPER_SETTINGS["tab_open_delay"])


def open_walmart_reviews(driver, pause, log):
    """Walmart: activate the "Customer Reviews" section."""
    _open_reviews_tab(driver, WALMART_SELECTORS["reviews_tab"], pause, log)


def open_bestbuy_reviews(driver, pause, log):
    """Best Buy: activate the "Reviews" tab."""
    _open_reviews_tab(driver, BESTBUY_SELECTORS["reviews_tab"], pause, log)


def scroll_whole_page(driver, pause, log):
    """Generic: scroll down in steps so lazy-loaded review widgets render."""
    scrolled = scroll_incrementally(driver)
    log.debug("Scrolled %s px", scrolled)
    pause(*SCRAPER_SETTINGS["generic_scroll_delay"])


# =============================================================================
# STRATEGIES
# =============================================================================

class SiteStrategy:
    """
    Extraction strategy for a site with known, hand-tuned review markup.

    Records are kept unconditionally - the selectors are narrow enough to
    trust every container they match.
    """

    def __init__(self, name, selectors, rating_reader=None, prepare_steps=None):
        self.name = name
        self.selectors = selectors
        self.rating_reader = rating_reader
        self.prepare_steps = prepare_steps or []

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"

    def prepare(self, driver, pause, log=None):
        """Run the site's pre-extraction interactions (best effort)."""
        log = log or _logger
        for step in self.prepare_steps:
            try:
                step(driver, pause, log)
            except WebDriverException as e:
                log.warning("%s prepare step %s failed: %s", self.name, step.__name__, e)

    def locate_nodes(self, driver, log=None):
        """Review containers: all matches of the first container selector that matches."""
        return all_matches(driver, self.selectors["containers"])

    def extract_node(self, node):
        """Read all five fields from one review container."""
        rating_element = first_match(node, self.selectors["rating"])
        rating = None
        if rating_element is not None and self.rating_reader is not None:
            rating = self.rating_reader(rating_element)

        return ReviewRecord(
            rating=rating or NOT_AVAILABLE,
            title=parse_title(node, self.selectors["title"]).value,
            date=parse_date(node, self.selectors["date"]).value,
            text=first_text(node, self.selectors["text"]).value,
            verified=parse_verified(node, self.selectors["verified"]).value,
        )

    def admit(self, record):
        return True


class GenericStrategy(SiteStrategy):
    """
    Fallback for unknown sites - broad selector lists plus heuristics for
    ratings and body text. Short records are discarded because broad
    container selectors also match non-review blocks.
    """

    def __init__(self, name="generic", selectors=None, prepare_steps=None):
        super().__init__(
            name,
            selectors or GENERIC_SELECTORS,
            prepare_steps=[scroll_whole_page] if prepare_steps is None else prepare_steps,
        )

    def locate_nodes(self, driver, log=None):
        selector, nodes = super().locate_nodes(driver)
        if selector:
            (log or _logger).info("Found %d reviews with selector: %s", len(nodes), selector)
        return selector, nodes

    def extract_node(self, node):
        rating = parse_rating(node, self.selectors["rating"], self.selectors["star_icons"]).value
        title = parse_title(node, self.selectors["title"]).value
        date = parse_date(node, self.selectors["date"]).value
        text = parse_text(node, self.selectors["text"], title=title, date=date, rating=rating).value

        return ReviewRecord(
            rating=rating,
            title=title,
            date=date,
            text=text,
            verified=parse_verified(node, self.selectors["verified"]).value,
        )

    def admit(self, record):
        return admit_generic(record)


AMAZON = SiteStrategy(
    "amazon", AMAZON_SELECTORS,
    rating_reader=rating_first_word,
    prepare_steps=[expand_read_more],
)

WALMART = SiteStrategy(
    "walmart", WALMART_SELECTORS,
    rating_reader=rating_aria_label_without_stars,
    prepare_steps=[open_walmart_reviews],
)

BESTBUY = SiteStrategy(
    "bestbuy", BESTBUY_SELECTORS,
    rating_reader=rating_aria_label_digits,
    prepare_steps=[open_bestbuy_reviews],
)

GENERIC = GenericStrategy()

# Checked in order; the first key contained in the hostname wins
SITE_STRATEGIES = (
    ("amazon", AMAZON),
    ("walmart", WALMART),
    ("bestbuy", BESTBUY),
)


def dispatch(hostname):
    """
    Pick the extraction strategy for a hostname.

    Always returns a strategy - unknown sites get the generic one.
    """
    hostname = (hostname or "").lower()
    for key, strategy in SITE_STRATEGIES:
        if key in hostname:
            return strategy
    return GENERIC


def strategy_for_url(url):
    """Pick the extraction strategy for a full page URL."""
    return dispatch(urlparse(url or "").hostname or "")
