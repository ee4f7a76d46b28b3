"""
Pipeline driver - dispatch, expand, bound, extract.

The node list is truncated to max_reviews before any field is read, so
excess reviews cost nothing beyond being located.
"""

import logging
from functools import partial
from urllib.parse import urlparse

from selenium.common.exceptions import WebDriverException

from .expansion import expand_content
from .models import ExtractionReport, NodeResult
from .strategies import dispatch
from .utils.driver_utils import random_delay

_logger = logging.getLogger(__name__)


def extract_node(strategy, node, log=None):
    """
    Extract one review node.

    Returns:
        NodeResult: the record, or a skip with the reason ("error" when
        extraction raised, "rejected" when the strategy refused the record)
    """
    log = log or _logger
    try:
        record = strategy.extract_node(node)
    except Exception as e:
        log.warning("Error extracting %s review: %s", strategy.name, e)
        return NodeResult(skipped_reason="error", error=str(e))

    if not strategy.admit(record):
        log.debug("Rejected %s review with %d chars of text", strategy.name, len(record.text))
        return NodeResult(skipped_reason="rejected")

    return NodeResult(record=record)


def _current_hostname(driver):
    try:
        return urlparse(driver.current_url).hostname or ""
    except WebDriverException:
        return ""


def extract_with_report(driver, max_reviews, strategy=None, pause=random_delay, logger=None):
    """
    Extract up to max_reviews reviews from the page the driver is on.

    Args:
        driver: Selenium WebDriver instance (already on the product page)
        max_reviews: Maximum number of review nodes to extract
        strategy: Strategy to use (default: dispatched from the current hostname)
        pause: Callable(min_seconds, max_seconds) run after every interaction
        logger: Logger for warnings (default: module logger)

    Returns:
        ExtractionReport: records plus skip count and expansion details
    """
    log = logger or _logger
    if strategy is None:
        strategy = dispatch(_current_hostname(driver))

    report = ExtractionReport(strategy=strategy.name)
    log.info("Using %s strategy", strategy.name)

    try:
        strategy.prepare(driver, pause, log)
        report.expansion = expand_content(
            driver, partial(strategy.locate_nodes, log=log), pause=pause, logger=log
        )

        for node in report.expansion.nodes[:max(max_reviews, 0)]:
            result = extract_node(strategy, node, log)
            if result.skipped:
                report.skipped += 1
            else:
                report.records.append(result.record)

    except Exception as e:
        log.error("Error in %s reviews scraping: %s", strategy.name, e)

    return report


def extract(driver, max_reviews, strategy=None, pause=random_delay, logger=None):
    """
    Extract up to max_reviews reviews from the page the driver is on.

    Returns:
        list[ReviewRecord]: at most max_reviews records, in page order
    """
    return extract_with_report(driver, max_reviews, strategy=strategy, pause=pause, logger=logger).records
