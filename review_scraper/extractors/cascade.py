"""
Selector cascade - ordered CSS selector lists evaluated for the first
structurally present match.

A selector that matches wins even if the matched node has no text; the
remaining selectors are never evaluated.
"""

from selenium.webdriver.common.by import By

from ..models import FieldResult
from ..utils.driver_utils import safe_get_text


def all_matches(node, selectors):
    """
    Return every element matched by the first selector that matches anything.

    Args:
        node: WebElement (or driver) to search within
        selectors: Ordered list of CSS selectors

    Returns:
        tuple: (winning selector, list of elements) or (None, [])
    """
    for selector in selectors:
        elements = node.find_elements(By.CSS_SELECTOR, selector)
        if elements:
            return selector, elements
    return None, []


def first_match(node, selectors):
    """Return the first element of the first matching selector, or None."""
    _, elements = all_matches(node, selectors)
    return elements[0] if elements else None


def first_text(node, selectors, default=""):
    """Trimmed text of the first structural match, or the default if nothing matched."""
    element = first_match(node, selectors)
    if element is None:
        return FieldResult.default(default)
    return FieldResult.found(safe_get_text(element))


def is_present(node, selector):
    """True if the selector matches at least one element under node."""
    return bool(node.find_elements(By.CSS_SELECTOR, selector))
