"""In-memory stand-ins for Selenium's WebDriver and WebElement.

Selector matching is explicit: each fake maps selector strings to the
elements they return, so a test states exactly which selectors are
structurally present on the page.
"""

from selenium.common.exceptions import NoSuchElementException

from review_scraper.utils.driver_utils import IN_VIEWPORT_SCRIPT, READY_STATE_SCRIPT


class FakeElement:
    """A DOM node with canned text, attributes and selector matches."""

    def __init__(self, text="", attrs=None, matches=None, in_viewport=True,
                 click_error=None, on_click=None, error=None):
        self._text = text
        self.attrs = attrs or {}
        self.matches = matches or {}
        self.in_viewport = in_viewport
        self.click_error = click_error
        self.on_click = on_click
        self.error = error
        self.queries = []
        self.clicks = 0
        self.touched = False

    @property
    def text(self):
        self.touched = True
        return self._text

    def get_attribute(self, name):
        self.touched = True
        if name == "textContent" and name not in self.attrs:
            return self._text
        return self.attrs.get(name)

    def find_elements(self, by, value):
        self.touched = True
        self.queries.append(value)
        if self.error is not None:
            raise self.error
        return list(self.matches.get(value, []))

    def find_element(self, by, value):
        elements = self.find_elements(by, value)
        if not elements:
            raise NoSuchElementException(value)
        return elements[0]

    def click(self):
        if self.click_error is not None:
            raise self.click_error
        self.clicks += 1
        if self.on_click is not None:
            self.on_click(self)


class FakeDriver(FakeElement):
    """A page: the document root plus the WebDriver-level calls."""

    def __init__(self, url="https://shop.example.com/product/1", matches=None, find_error=None):
        super().__init__(matches=matches, error=find_error)
        self.current_url = url
        self.scripts = []
        self.async_scripts = []
        self.visited = []
        self.quit_called = False

    def get(self, url):
        self.visited.append(url)
        self.current_url = url

    def execute_script(self, script, *args):
        self.scripts.append((script, args))
        if script == IN_VIEWPORT_SCRIPT:
            return args[0].in_viewport
        if script == READY_STATE_SCRIPT:
            return "complete"
        return None

    def execute_async_script(self, script, *args):
        self.async_scripts.append((script, args))
        return args[1] if len(args) > 1 else 0

    def quit(self):
        self.quit_called = True


class PauseRecorder:
    """Stands in for random_delay and records every requested pause."""

    def __init__(self):
        self.calls = []

    def __call__(self, min_seconds=1, max_seconds=3):
        self.calls.append((min_seconds, max_seconds))
        return 0


def _node(value):
    return value if isinstance(value, FakeElement) else FakeElement(value)


def make_review(selectors, rating=None, title=None, date=None, body=None, verified=False, **kwargs):
    """
    Build a review container for a selector table from config.py.

    Each field may be a string (text of the matched node), a FakeElement,
    or None to leave the field's first selector absent.
    """
    matches = {}
    for field, value in (("rating", rating), ("title", title), ("date", date), ("text", body)):
        if value is not None:
            matches[selectors[field][0]] = [_node(value)]
    if verified:
        matches[selectors["verified"]] = [FakeElement("Verified Purchase")]
    matches.update(kwargs.pop("matches", {}))
    return FakeElement(matches=matches, **kwargs)
