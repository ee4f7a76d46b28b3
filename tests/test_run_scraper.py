"""Tests for the command line entry point."""

import pytest
from fakes import FakeDriver, make_review
from selenium.common.exceptions import SessionNotCreatedException

from review_scraper import run_scraper
from review_scraper.config import AMAZON_SELECTORS
from review_scraper.utils import driver_utils

AMAZON_URL = "https://www.amazon.com/dp/B000000000"


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(driver_utils.time, "sleep", lambda seconds: None)


def _amazon_page(count):
    reviews = [
        make_review(AMAZON_SELECTORS, rating="5.0 out of 5 stars", title=f"Title {i}",
                    date="May 2, 2024", body="x" * 200)
        for i in range(count)
    ]
    return FakeDriver(url="about:blank", matches={AMAZON_SELECTORS["containers"][0]: reviews})


def test_missing_url_is_fatal(tmp_path, capsys):
    output = tmp_path / "reviews.csv"

    assert run_scraper.main(["-o", str(output)]) == 1

    assert not output.exists()
    assert "Please provide a URL" in capsys.readouterr().err


def test_invalid_url_is_fatal(tmp_path):
    output = tmp_path / "reviews.csv"
    assert run_scraper.main(["-u", "ftp//nowhere", "-o", str(output)]) == 1
    assert not output.exists()


def test_browser_launch_failure_is_fatal(tmp_path, monkeypatch):
    def fail(**kwargs):
        raise SessionNotCreatedException("no chrome")

    monkeypatch.setattr(run_scraper, "setup_driver", fail)
    output = tmp_path / "reviews.csv"

    assert run_scraper.main(["-u", AMAZON_URL, "-o", str(output)]) == 1
    assert not output.exists()


def test_navigation_failure_quits_browser(tmp_path, monkeypatch):
    driver = _amazon_page(1)
    monkeypatch.setattr(run_scraper, "setup_driver", lambda **kwargs: driver)
    monkeypatch.setattr(run_scraper, "safe_navigate", lambda *args, **kwargs: False)
    output = tmp_path / "reviews.csv"

    assert run_scraper.main(["-u", AMAZON_URL, "-o", str(output)]) == 1

    assert driver.quit_called
    assert not output.exists()


def test_full_run_writes_file_and_prints_samples(tmp_path, monkeypatch, capsys):
    driver = _amazon_page(5)
    monkeypatch.setattr(run_scraper, "setup_driver", lambda **kwargs: driver)
    output = tmp_path / "reviews.csv"

    code = run_scraper.main(["-u", AMAZON_URL, "-o", str(output), "-m", "4", "-d", "0"])

    assert code == 0
    assert driver.visited == [AMAZON_URL]
    assert driver.quit_called

    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Rating,Date,Verified,Title,Text"
    assert len(lines) == 5

    out = capsys.readouterr().out
    assert "Review #3:" in out
    assert "Review #4:" not in out
    assert "x" * 150 + "..." in out
