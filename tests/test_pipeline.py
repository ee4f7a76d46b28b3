"""Tests for the pipeline driver."""

import logging

from fakes import FakeDriver, FakeElement, make_review

from review_scraper import extract, extract_with_report
from review_scraper.config import AMAZON_SELECTORS
from review_scraper.strategies import AMAZON, GENERIC

AMAZON_URL = "https://www.amazon.com/dp/B000000000"
REVIEW = AMAZON_SELECTORS["containers"][0]


def _amazon_reviews(count):
    return [
        make_review(
            AMAZON_SELECTORS,
            rating=f"{i % 5 + 1}.0 out of 5 stars",
            title=f"Review {i}",
            date="June 1, 2024",
            body=f"Body of review {i}",
        )
        for i in range(count)
    ]


def test_truncates_before_extraction(pause):
    nodes = _amazon_reviews(5)
    driver = FakeDriver(url=AMAZON_URL, matches={REVIEW: nodes})

    records = extract(driver, max_reviews=2, pause=pause)

    assert [r.title for r in records] == ["Review 0", "Review 1"]
    assert all(node.touched for node in nodes[:2])
    # Nodes beyond the bound are never queried
    assert not any(node.touched for node in nodes[2:])


def test_dispatches_from_current_url(pause):
    driver = FakeDriver(url=AMAZON_URL, matches={REVIEW: _amazon_reviews(1)})

    report = extract_with_report(driver, max_reviews=10, pause=pause)

    assert report.strategy == "amazon"
    assert len(report.records) == 1
    assert not report.expansion.expanded


def test_failing_node_is_skipped(pause, caplog):
    nodes = _amazon_reviews(3)
    nodes[1] = FakeElement(error=RuntimeError("detached node"))
    driver = FakeDriver(url=AMAZON_URL, matches={REVIEW: nodes})

    with caplog.at_level(logging.WARNING):
        report = extract_with_report(driver, max_reviews=10, pause=pause)

    assert [r.title for r in report.records] == ["Review 0", "Review 2"]
    assert report.skipped == 1
    assert "detached node" in caplog.text


def test_strategy_level_failure_returns_partial_list(pause, caplog):
    driver = FakeDriver(url=AMAZON_URL, find_error=RuntimeError("browser went away"))

    with caplog.at_level(logging.ERROR):
        records = extract(driver, max_reviews=10, pause=pause)

    assert records == []
    assert "browser went away" in caplog.text


def test_generic_discards_short_reviews(pause):
    nodes = [
        FakeElement(matches={"p": [FakeElement("Too short")]}),          # 9 chars
        FakeElement(matches={"p": [FakeElement("Long enough")]}),        # 11 chars
        FakeElement(matches={"p": [FakeElement("Excellent product, would buy again")]}),
    ]
    driver = FakeDriver(matches={".review": nodes})

    report = extract_with_report(driver, max_reviews=10, strategy=GENERIC, pause=pause)

    assert [r.text for r in report.records] == ["Long enough", "Excellent product, would buy again"]
    assert report.skipped == 1


def test_expansion_reveals_more_nodes(pause):
    nodes = _amazon_reviews(2)
    driver = FakeDriver(url=AMAZON_URL, matches={REVIEW: nodes})

    def load_more(button):
        nodes.extend(_amazon_reviews(2))
        driver.matches.pop(".load-more-button")

    driver.matches[".load-more-button"] = [FakeElement("Load more", on_click=load_more)]

    report = extract_with_report(driver, max_reviews=3, strategy=AMAZON, pause=pause)

    assert report.expansion.clicks == 1
    assert len(report.expansion.nodes) == 4
    assert len(report.records) == 3


def test_zero_bound_extracts_nothing(pause):
    nodes = _amazon_reviews(2)
    driver = FakeDriver(url=AMAZON_URL, matches={REVIEW: nodes})

    assert extract(driver, max_reviews=0, pause=pause) == []
    assert not any(node.touched for node in nodes)


def test_injected_logger_receives_container_selector(pause):
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    log = logging.getLogger("test.pipeline.sink")
    log.setLevel(logging.INFO)
    log.addHandler(ListHandler())
    log.propagate = False

    body = FakeElement("A review body long enough to keep")
    driver = FakeDriver(matches={".review": [FakeElement(matches={"p": [body]})]})

    extract_with_report(driver, max_reviews=10, strategy=GENERIC, pause=pause, logger=log)

    assert "Found 1 reviews with selector: .review" in [r.getMessage() for r in records]
