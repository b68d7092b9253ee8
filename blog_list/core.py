from __future__ import annotations

import logging
from functools import partial
from typing import Any, Awaitable, Callable, List, Optional, Tuple, Union

from .config import DEFAULT_BLOG_DATA_URL, DEFAULT_FETCH_TIMEOUT_SEC, SEARCH_DEBOUNCE_SECONDS, Settings
from .debounce import Debouncer, Scheduler
from .exceptions import LoadError
from .fetcher import fetch_blog_records_async
from .models import BlogPost, QueryState, SortKey
from .paginator import PAGE_SIZE, has_more, paginate
from .parser import load_blog_posts
from .query import categories, derive_view_for
from .render import BlogListView, format_error, to_card

logger = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[List[Any]]]


class BlogList:
    """
    High-level API: load a blog feed once, then search, filter, sort and page through it.

    Pipeline: load → search (title) → category filter → sort → paginate → render

    Every control change resets pagination to the first page and re-runs the
    pipeline from the master collection; the feed is not fetched again.
    """

    def __init__(
        self,
        view: BlogListView,
        *,
        url: str = DEFAULT_BLOG_DATA_URL,
        fetch: Optional[Fetch] = None,
        timeout: Optional[float] = DEFAULT_FETCH_TIMEOUT_SEC,
        page_size: int = PAGE_SIZE,
        search_delay: float = SEARCH_DEBOUNCE_SECONDS,
        schedule: Optional[Scheduler] = None,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.view = view
        self.url = url
        self.page_size = page_size
        self._fetch = fetch or partial(fetch_blog_records_async, timeout=timeout)
        self._master: Tuple[BlogPost, ...] = ()
        self._view_posts: List[BlogPost] = []
        self._state = QueryState()
        self._request_seq = 0
        self._loads_in_flight = 0
        self._debounced_search = Debouncer(self.set_search_term, search_delay, schedule=schedule)

    @classmethod
    def from_settings(cls, view: BlogListView, settings: Settings, **kwargs: Any) -> "BlogList":
        return cls(
            view,
            url=settings.blog_data_url,
            timeout=settings.fetch_timeout,
            page_size=settings.page_size,
            search_delay=settings.search_debounce,
            **kwargs,
        )

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def posts(self) -> Tuple[BlogPost, ...]:
        return self._master

    @property
    def view_posts(self) -> List[BlogPost]:
        return list(self._view_posts)

    @property
    def has_more(self) -> bool:
        return has_more(self._view_posts, self._state.page, self.page_size)

    def categories(self) -> List[str]:
        return categories(self._master)

    async def init(self) -> bool:
        """
        Load the feed and render the first page.

        Load failures end up on the view's error surface and return False;
        calling init() again is the way to retry. The loading indicator stays
        up until the last overlapping init() finishes.
        """
        self._loads_in_flight += 1
        self.view.show_loading()
        try:
            if not await self.load():
                return False
            self.refresh()
            return True
        except LoadError as err:
            self.show_error(err)
            return False
        finally:
            self._loads_in_flight -= 1
            if not self._loads_in_flight:
                self.view.hide_loading()

    async def load(self) -> bool:
        """
        Fetch the feed and replace the master collection.

        Returns False when a newer load was started while this one was in
        flight; its result (or failure) is then discarded.
        """
        self._request_seq += 1
        seq = self._request_seq
        logger.info("Loading blogs from %s", self.url)
        try:
            records = await self._fetch(self.url)
        except LoadError:
            if seq != self._request_seq:
                logger.debug("Ignoring failure of superseded blog load #%d", seq)
                return False
            raise

        if seq != self._request_seq:
            logger.debug("Ignoring stale blog load #%d (latest is #%d)", seq, self._request_seq)
            return False

        self._master = load_blog_posts(records)
        logger.info("Loaded %d blog posts", len(self._master))
        return True

    def set_search_term(self, term: str) -> None:
        self._debounced_search.cancel()
        self._state = self._state.with_search(term)
        self.refresh()

    def on_search_input(self, term: str) -> None:
        """Search-field handler: applies the term once typing pauses."""
        self._debounced_search(term)

    def set_category(self, category: Optional[str]) -> None:
        self._state = self._state.with_category(category)
        self.refresh()

    def set_sort_key(self, sort_key: Union[SortKey, str, None]) -> None:
        self._state = self._state.with_sort(sort_key)
        self.refresh()

    def refresh(self) -> None:
        self._view_posts = derive_view_for(self._master, self._state)
        self.render()

    def advance_page(self) -> None:
        self._state = self._state.next_page()
        self.render()

    def render(self) -> None:
        page = paginate(self._view_posts, self._state.page, self.page_size)
        self.view.display([to_card(p) for p in page])

    def show_error(self, err: LoadError) -> None:
        logger.error("Blog load failed (%s): %s", err.kind.value, err)
        self.view.clear()
        self.view.show_error(format_error(err))

    def teardown(self) -> None:
        self._debounced_search.cancel()
