"""
Console output for the CLI.

Colored status lines and a short sample of the extracted reviews.
"""
import logging
import sys
from datetime import datetime

from ..config import SAMPLE_REVIEW_COUNT, SAMPLE_TEXT_LENGTH

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "success": "\033[92m",    # Green
    "error": "\033[91m",      # Red
    "warning": "\033[93m",    # Yellow
    "sample": "\033[96m",     # Cyan
    "info": "\033[97m",       # White
}

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _colorize(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


def configure_logging(verbose: bool = False):
    """Send library log records to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def truncate(text: str, max_length: int = SAMPLE_TEXT_LENGTH) -> str:
    """Cut text to max_length characters, marking the cut with '...'."""
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def log_header(title: str):
    """Log a section header."""
    print(f"\n{'='*60}")
    print(_colorize(f"  {title}", "bold"))
    print(f"{'='*60}")


def log_status(message: str):
    print(f"{_timestamp()} {_colorize('[SCRAPER]', 'info')} {message}")


def log_success(message: str):
    print(f"{_timestamp()} {_colorize('✓', 'success')} {message}")


def log_error(message: str, exception: Exception = None):
    """Log a fatal error."""
    print(f"{_timestamp()} {_colorize('[ERROR]', 'error')} {message}", file=sys.stderr)
    if exception:
        print(f"  Exception: {_colorize(str(exception), 'error')}", file=sys.stderr)


def log_sample_reviews(reviews, count: int = SAMPLE_REVIEW_COUNT):
    """Print the first few reviews with their text truncated."""
    if not reviews:
        return

    print(_colorize("\nSample of extracted reviews:", "warning"))
    for i, review in enumerate(reviews[:count]):
        print(_colorize(f"\nReview #{i+1}:", "sample"))
        print(f"Rating: {review.rating}")
        print(f"Date: {review.date}")
        print(f"Text: {truncate(review.text)}")
