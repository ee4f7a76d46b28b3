"""
File I/O utilities for saving extracted reviews.
"""

import csv
import logging
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from ..config import OUTPUT_COLUMNS

logger = logging.getLogger(__name__)

SHEET_NAME = "Reviews"


def ensure_parent_dir(filepath):
    """Create the output file's directory if it doesn't exist."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    return filepath


def _csv_value(value):
    # Booleans are written lowercase ("true"/"false")
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def save_to_csv(reviews, filepath):
    """
    Save reviews as CSV.

    Header is unquoted; every data field is double-quoted with inner
    quotes doubled. Lines end with "\\n".
    """
    with open(filepath, "w", newline="", encoding="utf-8") as csvfile:
        csvfile.write(",".join(header for header, _, _ in OUTPUT_COLUMNS) + "\n")
        writer = csv.writer(csvfile, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for review in reviews:
            writer.writerow([_csv_value(getattr(review, key)) for _, key, _ in OUTPUT_COLUMNS])


def save_to_xlsx(reviews, filepath):
    """Save reviews as a single-sheet Excel workbook."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    ws.append([header for header, _, _ in OUTPUT_COLUMNS])
    for index, (_, _, width) in enumerate(OUTPUT_COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(index)].width = width

    for review in reviews:
        ws.append([getattr(review, key) for _, key, _ in OUTPUT_COLUMNS])

    wb.save(str(filepath))


def save_reviews(reviews, output_path):
    """
    Save reviews to output_path. A ".csv" extension writes CSV, anything
    else writes XLSX.

    Returns:
        bool: True if the file was written
    """
    try:
        filepath = ensure_parent_dir(output_path)
        if filepath.suffix.lower() == ".csv":
            save_to_csv(reviews, filepath)
        else:
            save_to_xlsx(reviews, filepath)
    except OSError as e:
        logger.error("Error saving reviews to %s: %s", output_path, e)
        return False

    logger.info("Saved %d reviews to %s", len(reviews), filepath)
    return True
