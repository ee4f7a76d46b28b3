"""
Extractors for review fields.

- cascade: ordered selector lists evaluated for the first structural match
- fields: heuristic parsers for rating, title, date, text and verified flag

All extractors operate on Selenium elements (or anything with the same
find_elements / text / get_attribute surface) and never raise on a missing
field.
"""

from .cascade import all_matches, first_match, first_text, is_present
from .fields import (
    parse_rating,
    parse_title,
    parse_date,
    parse_text,
    parse_verified,
    admit_generic,
    rating_from_text,
    rating_from_style,
    strip_metadata,
)
