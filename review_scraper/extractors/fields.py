"""
Field parsers - turn raw review node text and attributes into normalized values.

Every parser returns a FieldResult and never raises because a field is
missing; absence resolves to the field's sentinel.
"""

import re
from decimal import Decimal, ROUND_HALF_UP

from selenium.webdriver.common.by import By

from ..config import NOT_AVAILABLE, MIN_GENERIC_TEXT_LENGTH
from ..models import FieldResult
from ..utils.driver_utils import safe_get_text, safe_get_text_content, safe_get_attribute
from .cascade import all_matches, first_match, is_present

NUMBER_PATTERN = re.compile(r"\d+(\.\d+)?")
WIDTH_PERCENT_PATTERN = re.compile(r"width:\s*(\d+)%")
WHITESPACE_PATTERN = re.compile(r"\s+")


def rating_from_text(text):
    """First decimal number in the text, e.g. "4.5 out of 5 stars" -> "4.5"."""
    match = NUMBER_PATTERN.search(text or "")
    return match.group(0) if match else None


def rating_from_style(style):
    """
    Convert a star-bar width percentage to a 0-5 rating.

    Assumes 100% = 5 stars: rating = percentage / 20, rounded half-up to one
    decimal ("width: 80%" -> "4.0", "width: 37%" -> "1.9").
    """
    match = WIDTH_PERCENT_PATTERN.search(style or "")
    if not match:
        return None
    rating = (Decimal(match.group(1)) / 20).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return str(rating)


def parse_rating(node, selectors, star_icon_selector=None):
    """
    Heuristic rating parser.

    For each candidate rating node in order: numeric text wins, then the
    inline style width percentage. A candidate that yields neither falls
    through to the next one. If no candidate produced a rating, the filled
    star icons anywhere in the review are counted.
    """
    for selector in selectors:
        elements = node.find_elements(By.CSS_SELECTOR, selector)
        if not elements:
            continue
        element = elements[0]

        rating = rating_from_text(safe_get_text_content(element))
        if rating is None:
            rating = rating_from_style(safe_get_attribute(element, "style"))
        if rating is not None:
            return FieldResult.found(rating)

    if star_icon_selector:
        stars = node.find_elements(By.CSS_SELECTOR, star_icon_selector)
        if stars:
            return FieldResult.found(str(len(stars)))

    return FieldResult.default(NOT_AVAILABLE)


def parse_title(node, selectors):
    """Trimmed text of the first matching title node, "" if none."""
    element = first_match(node, selectors)
    if element is None:
        return FieldResult.default("")
    return FieldResult.found(safe_get_text(element))


def parse_date(node, selectors):
    """
    Trimmed text of the first matching date node. An empty node falls back
    to its machine-readable datetime attribute. "N/A" if nothing matched.
    """
    element = first_match(node, selectors)
    if element is None:
        return FieldResult.default(NOT_AVAILABLE)

    date = safe_get_text(element)
    if not date:
        date = safe_get_attribute(element, "datetime") or ""
    return FieldResult.found(date)


def strip_metadata(text, title, date, rating):
    """
    Remove already-extracted metadata from a review's full text.

    Each value is removed once (first occurrence) in the order title, date,
    rating; sentinel values are skipped. Whitespace is collapsed afterwards.
    """
    if title:
        text = text.replace(title, "", 1)
    if date and date != NOT_AVAILABLE:
        text = text.replace(date, "", 1)
    if rating and rating != NOT_AVAILABLE:
        text = text.replace(rating, "", 1)
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def parse_text(node, selectors, title="", date=NOT_AVAILABLE, rating=NOT_AVAILABLE):
    """
    Review body text.

    All nodes matched by the winning selector are joined with a single
    space. Without a dedicated text container the whole review node's text
    is used, minus the title, date and rating.
    """
    _, elements = all_matches(node, selectors)
    parts = [safe_get_text(element) for element in elements]
    text = " ".join(part for part in parts if part)
    if text:
        return FieldResult.found(text)

    return FieldResult.default(strip_metadata(safe_get_text(node), title, date, rating))


def parse_verified(node, selector):
    """True only if the verification marker is present."""
    if not selector:
        return FieldResult.default(False)
    if is_present(node, selector):
        return FieldResult.found(True)
    return FieldResult.default(False)


def admit_generic(record):
    """Generic-strategy admission: keep reviews with more than 10 characters of text."""
    return len(record.text) > MIN_GENERIC_TEXT_LENGTH
