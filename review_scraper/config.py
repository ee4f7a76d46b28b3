"""
Configuration for the product review scraper.
Add a new site by adding its selector table here and a strategy in strategies.py.
"""
import os
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()


# Scraper settings - delays are (min, max) seconds, scaled by the CLI --delay
SCRAPER_SETTINGS = {
    "max_expansion_rounds": 5,          # "Load more" clicks before giving up
    "max_retries": 2,                   # Navigation retry attempts
    "page_settle_delay": (2, 4),        # After navigation
    "before_click_delay": (1, 2),       # After scrolling an affordance into view
    "after_load_more_delay": (2, 4),    # Let asynchronous reviews materialize
    "read_more_delay": (0.3, 0.8),      # Between Amazon "Read more" expansions
    "tab_open_delay": (2, 3),           # After opening a site's reviews tab
    "cookie_delay": (0.5, 1.5),
    "section_scroll_delay": (0.5, 1.5),
    "section_click_delay": (1.5, 3),
    "section_fallback_delay": (1, 2),
    "generic_scroll_step": 100,         # Pixels per incremental scroll
    "generic_scroll_limit": 10000,      # Stop scrolling after this many pixels
    "generic_scroll_delay": (2, 3),
}

# Sentinel values
NOT_AVAILABLE = "N/A"

# Generic strategy keeps a review only if its text is longer than this
MIN_GENERIC_TEXT_LENGTH = 10

# Lowercases an XPath string expression so text matching ignores case
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_LOWERCASE_TEXT = f"translate(normalize-space(.), '{_UPPER}', '{_LOWER}')"


def text_locator(tag, text):
    """("xpath", ...) locator for <tag> elements whose text contains text, ignoring case."""
    return ("xpath", f"//{tag}[contains({_LOWERCASE_TEXT}, '{text.lower()}')]")


# "Load more" affordances, tried in order each round.
# ("css", value) pairs are CSS selectors, ("xpath", value) pairs match button text.
LOAD_MORE_SELECTORS = [
    text_locator("button", "Load More"),
    text_locator("button", "See More"),
    text_locator("button", "Show More"),
    text_locator("a", "Load More"),
    text_locator("a", "See More"),
    ("css", '[data-hook="load-more-button"]'),
    ("css", ".load-more-button"),
    ("css", ".show-more-reviews"),
    ("css", ".reviews-load-more"),
    ("css", ".bv-content-btn-pages-load-more"),
    ("css", ".see-more-reviews"),
    ("css", "#reviews-load-more"),
]

# Cookie consent buttons - the first present one is clicked
COOKIE_SELECTORS = [
    ("css", "#onetrust-accept-btn-handler"),
    ("css", ".accept-cookies"),
    ("css", 'button[aria-label*="Accept"]'),
    ("css", 'button[aria-label*="accept"]'),
    text_locator("button", "Accept"),
    text_locator("button", "Accept All"),
    text_locator("button", "Allow all"),
    text_locator("button", "I accept"),
    ("css", 'button[data-testid*="cookie-accept"]'),
    ("css", ".cookie-banner button"),
    ("css", "#cookie-banner button"),
]

# Reviews tab / link candidates
REVIEW_TAB_SELECTORS = [
    text_locator("a", "Customer Reviews"),
    text_locator("a", "Reviews"),
    text_locator("button", "Reviews"),
    text_locator("a", "Ratings & Reviews"),
    ("css", "#reviews-tab"),
    ("css", ".reviews-tab"),
    ("css", '[data-tab="reviews"]'),
    ("css", '[data-target="#reviews"]'),
    ("css", '[href="#reviews"]'),
    ("css", '[aria-controls="reviews"]'),
    ("css", ".review-link"),
    ("css", ".product-reviews-tab"),
    ("css", ".pr-snippet-read-reviews"),
    ("css", ".bv-rating-ratio"),
    ("css", ".ratings-reviews"),
]

# =============================================================================
# SITE SELECTOR TABLES
# A comma group ("a, b") is one cascade entry: it matches both classes in page order.
# =============================================================================

AMAZON_SELECTORS = {
    "containers": ['[data-hook="review"]'],
    "rating": ['[data-hook="review-star-rating"]'],
    "title": ['[data-hook="review-title"]'],
    "date": ['[data-hook="review-date"]'],
    "text": ['[data-hook="review-body"]'],
    "verified": '[data-hook="avp-badge"]',
    "read_more": '[data-hook="expand-collapse-read-more"]',
}

WALMART_SELECTORS = {
    "containers": [".review-card"],
    "rating": [".stars-container"],
    "title": [".review-title"],
    "date": [".review-date"],
    "text": [".review-text"],
    "verified": ".verified-purchaser-badge",
    "reviews_tab": text_locator("button", "Customer Reviews"),
}

BESTBUY_SELECTORS = {
    "containers": [".review-item, .user-review"],
    "rating": [".c-review-rating"],
    "title": [".c-review-title, .review-title"],
    "date": [".submission-date, .review-date"],
    "text": [".c-review-content, .review-content"],
    "verified": ".verified-purchaser",
    "reviews_tab": ("xpath", "//*[contains(@class, 'reviews-tab') or "
                             f"(contains(@class, 'v-tab') and contains({_LOWERCASE_TEXT}, 'reviews'))]"),
}

GENERIC_SELECTORS = {
    "containers": [
        ".review",
        ".review-item",
        '[data-hook="review"]',
        ".product-review",
        ".user-review",
        ".feedback",
        ".comment",
        'div[class*="review"]',
        'div[id*="review"]',
        'li[class*="review"]',
        ".ratings-reviews-item",
    ],
    "rating": [
        ".rating",
        ".stars",
        '[itemprop="ratingValue"]',
        ".score",
        ".review-rating",
        ".star-rating",
        'span[class*="star"]',
        'div[class*="star"]',
    ],
    "star_icons": ".fa-star, .filled-stars, .Icon--star-fill",
    "title": [
        ".review-title",
        '[itemprop="name"]',
        ".title",
        "h3",
        "h4",
        ".review-heading",
    ],
    "date": [
        ".date",
        ".review-date",
        '[itemprop="datePublished"]',
        ".timestamp",
        "time",
        ".published-date",
        ".submit-date",
    ],
    "text": [
        ".review-text",
        ".review-content",
        '[itemprop="reviewBody"]',
        ".description",
        ".comment-text",
        ".review-body",
        "p",
    ],
    "verified": '.verified-purchase, .verified-purchaser, .verified-buyer, [data-hook="avp-badge"]',
}

# Output columns - header text and record attribute, in file order
OUTPUT_COLUMNS = [
    ("Rating", "rating", 10),
    ("Date", "date", 20),
    ("Verified", "verified", 10),
    ("Title", "title", 30),
    ("Text", "text", 100),
]

# Samples shown by the CLI after a run
SAMPLE_REVIEW_COUNT = 3
SAMPLE_TEXT_LENGTH = 150


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime defaults loaded from environment variables."""

    MAX_REVIEWS: int = int(os.getenv("REVIEW_MAX_REVIEWS", "50"))
    OUTPUT_PATH: str = os.getenv("REVIEW_OUTPUT", "reviews.xlsx")
    DELAY_MS: int = int(os.getenv("REVIEW_DELAY_MS", "1000"))
    TIMEOUT_MS: int = int(os.getenv("REVIEW_TIMEOUT_MS", "30000"))
    PROXY: str = os.getenv("REVIEW_PROXY", "")
    HEADLESS: bool = _env_bool("REVIEW_HEADLESS", True)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
