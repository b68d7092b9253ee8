from typing import Any, Dict, List

import pytest

from blog_list.exceptions import LoadError


class RecordingView:
    """BlogListView double that records every call."""

    def __init__(self) -> None:
        self.displayed: List[list] = []
        self.errors: List[str] = []
        self.events: List[str] = []
        self.loading = False

    def display(self, cards) -> None:
        self.events.append("display")
        self.displayed.append(list(cards))

    def show_loading(self) -> None:
        self.events.append("show_loading")
        self.loading = True

    def hide_loading(self) -> None:
        self.events.append("hide_loading")
        self.loading = False

    def show_error(self, message: str) -> None:
        self.events.append("show_error")
        self.errors.append(message)

    def clear(self) -> None:
        self.events.append("clear")

    @property
    def last(self) -> list:
        return self.displayed[-1]


def make_record(title: str, **fields: Any) -> Dict[str, Any]:
    rec = {"title": title, "content": f"Body of {title}"}
    rec.update(fields)
    return rec


def static_fetch(records):
    calls = []

    async def _fetch(url: str):
        calls.append(url)
        return records

    _fetch.calls = calls
    return _fetch


def failing_fetch(error: LoadError):
    async def _fetch(url: str):
        raise error

    return _fetch


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def startup_records() -> List[Dict[str, Any]]:
    """15 records, 5 of them in Startups with distinct dates."""
    records = []
    for i in range(10):
        records.append(make_record(
            f"Gadget review {i}",
            category="Gadgets" if i % 2 else "Writing",
            reading_time=i + 1,
            published_date=f"2024-02-{i + 1:02d}",
        ))
    for day in (3, 21, 9, 30, 14):
        records.append(make_record(
            f"Startup story {day}",
            category="Startups",
            reading_time=4,
            published_date=f"2024-01-{day:02d}T08:00:00Z",
        ))
    return records


class _Handle:
    def __init__(self, delay, fn):
        self.delay = delay
        self.fn = fn
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Debouncer scheduler that only fires when told to."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, fn):
        handle = _Handle(delay, fn)
        self.handles.append(handle)
        return handle

    def run_pending(self):
        for handle in list(self.handles):
            if not handle.cancelled:
                handle.fn()
        self.handles = []
