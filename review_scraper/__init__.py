"""
Product Review Scraper Package

Extracts structured reviews (rating, title, date, text, verified purchase)
from rendered e-commerce product pages. Amazon, Walmart and Best Buy have
hand-tuned strategies; every other site goes through a generic heuristic
strategy.

Outputs:
- CSV (Rating,Date,Verified,Title,Text)
- XLSX (single "Reviews" sheet, same columns)

Usage:
    python -m review_scraper.run_scraper --url <product page>
    python -m review_scraper.run_scraper --url <product page> -o reviews.csv -m 20
"""

from .models import ReviewRecord, ExtractionReport, ExpansionResult
from .pipeline import extract, extract_with_report
from .strategies import dispatch, strategy_for_url, AMAZON, WALMART, BESTBUY, GENERIC

__all__ = [
    "ReviewRecord",
    "ExtractionReport",
    "ExpansionResult",
    "extract",
    "extract_with_report",
    "dispatch",
    "strategy_for_url",
    "AMAZON",
    "WALMART",
    "BESTBUY",
    "GENERIC",
]
