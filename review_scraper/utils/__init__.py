"""Utility modules for the review scraper."""

from .driver_utils import (
    setup_driver,
    safe_navigate,
    safe_get_text,
    safe_get_text_content,
    safe_get_attribute,
    find_by_locator,
    is_in_viewport,
    is_valid_url,
    random_delay,
    set_delay_scale,
)
from .file_utils import save_reviews, save_to_csv, save_to_xlsx
from .page_actions import handle_cookie_notices, open_reviews_section
