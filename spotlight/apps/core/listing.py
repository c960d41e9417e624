"""List screen state: search term, category filter, page and page size.

``ListState`` is immutable; every transition returns a new state so list
screens (and their tests) can reason about it without any rendering.
"""
import itertools
import time
from dataclasses import dataclass, replace
from urllib.parse import urlencode

from django.conf import settings

ALL_CATEGORIES = "all"
DEFAULT_DEBOUNCE_SECONDS = 0.5


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


@dataclass(frozen=True)
class ListState:
    search_term: str = ""
    debounced_search_term: str = ""
    category: str = ALL_CATEGORIES
    current_page: int = 1
    page_size: int = 10

    def edit_search(self, term):
        return replace(self, search_term=term)

    def commit_search(self):
        return replace(self, debounced_search_term=self.search_term, current_page=1)

    def set_category(self, category):
        return replace(self, category=category or ALL_CATEGORIES, current_page=1)

    def set_page_size(self, page_size):
        return replace(self, page_size=page_size, current_page=1)

    def go_to_page(self, page, total_pages):
        page = max(1, min(page, max(total_pages, 1)))
        return replace(self, current_page=page)

    @property
    def has_pending_search(self):
        return self.search_term != self.debounced_search_term

    def fetch_params(self):
        params = {"page": self.current_page, "limit": self.page_size}
        search = self.debounced_search_term.strip()
        if search:
            params["search"] = search
        if self.category != ALL_CATEGORIES:
            params["category"] = self.category
        return params

    @classmethod
    def from_query(cls, params, page_sizes=(10, 20, 50), default_page_size=None, categories=None):
        """Build a committed state from request parameters (``q``, ``category``,
        ``page``, ``limit``); values outside the allowed sets fall back to
        defaults."""
        default_page_size = default_page_size or page_sizes[0]
        term = (params.get("q") or "").strip()
        category = params.get("category") or ALL_CATEGORIES
        if categories is not None and category not in categories:
            category = ALL_CATEGORIES
        page_size = _positive_int(params.get("limit"), default_page_size)
        if page_size not in page_sizes:
            page_size = default_page_size
        return cls(
            search_term=term,
            debounced_search_term=term,
            category=category,
            current_page=_positive_int(params.get("page"), 1),
            page_size=page_size,
        )

    def to_query(self, default_page_size=None):
        pairs = []
        if self.debounced_search_term:
            pairs.append(("q", self.debounced_search_term))
        if self.category != ALL_CATEGORIES:
            pairs.append(("category", self.category))
        if self.page_size != default_page_size:
            pairs.append(("limit", self.page_size))
        if self.current_page != 1:
            pairs.append(("page", self.current_page))
        return urlencode(pairs)


class Debouncer:
    """Commit the latest value once it has been stable for ``delay`` seconds."""

    def __init__(self, delay=None, clock=time.monotonic):
        if delay is None:
            delay = settings.SPOTLIGHT.get("SEARCH_DEBOUNCE_SECONDS", DEFAULT_DEBOUNCE_SECONDS)
        self.delay = delay
        self._clock = clock
        self._value = None
        self._deadline = None

    @property
    def pending(self):
        return self._deadline is not None

    def push(self, value):
        self._value = value
        self._deadline = self._clock() + self.delay

    def cancel(self):
        self._value = None
        self._deadline = None

    def poll(self):
        """Return ``(True, value)`` once the delay has elapsed, else ``(False, None)``."""
        if self._deadline is None or self._clock() < self._deadline:
            return False, None
        value = self._value
        self.cancel()
        return True, value


class RequestSequencer:
    """Tag fetches with increasing numbers so late responses can be dropped."""

    def __init__(self):
        self._counter = itertools.count(1)
        self.latest = 0

    def issue(self):
        self.latest = next(self._counter)
        return self.latest

    def is_current(self, seq):
        return seq == self.latest


class ListController:
    """Drives a ``ListState`` through debounced search and sequenced fetches.

    ``fetch`` is called with the state's ``fetch_params()`` and must return an
    action result dict; results that arrive after a newer fetch was issued
    are ignored.
    """

    def __init__(self, fetch, state=None, debouncer=None):
        self.fetch = fetch
        self.state = state or ListState()
        self.debouncer = debouncer or Debouncer()
        self.sequencer = RequestSequencer()
        self.result = None

    def type_search(self, term):
        self.state = self.state.edit_search(term)
        self.debouncer.push(term)

    def tick(self):
        fired, _ = self.debouncer.poll()
        if fired:
            self.state = self.state.commit_search()
            return self.refresh()
        return None

    def choose_category(self, category):
        self.state = self.state.set_category(category)
        return self.refresh()

    def choose_page_size(self, page_size):
        self.state = self.state.set_page_size(page_size)
        return self.refresh()

    def go_to_page(self, page):
        total_pages = (self.result or {}).get("pagination", {}).get("total_pages", 1)
        self.state = self.state.go_to_page(page, total_pages)
        return self.refresh()

    def begin_fetch(self):
        return self.sequencer.issue(), self.state.fetch_params()

    def complete_fetch(self, seq, result):
        if not self.sequencer.is_current(seq):
            return False
        self.result = result
        return True

    def refresh(self):
        seq, params = self.begin_fetch()
        self.complete_fetch(seq, self.fetch(**params))
        return self.result
