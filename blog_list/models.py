from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class BlogPost:
    """
    One blog post from the upstream feed.

    Fields mirror the feed's JSON keys; anything missing stays None and is
    defaulted at display or sort time, never here.
    """
    title: str
    content: str = ""
    category: Optional[str] = None
    reading_time: Optional[float] = None
    published_date: Optional[str] = None
    author: Optional[str] = None
    image: Optional[str] = None
    published_at: Optional[datetime] = None


class SortKey(str, Enum):
    NONE = ""
    DATE = "date"
    READING_TIME = "reading_time"
    CATEGORY = "category"

    @classmethod
    def parse(cls, value: Union["SortKey", str, None]) -> "SortKey":
        """Map a sort selector value to a key; unknown values mean no sorting."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip())
        except ValueError:
            return cls.NONE


@dataclass(frozen=True)
class QueryState:
    search_term: str = ""
    category: Optional[str] = None
    sort_key: SortKey = SortKey.NONE
    page: int = 1

    def with_search(self, search_term: str) -> "QueryState":
        return replace(self, search_term=search_term or "", page=1)

    def with_category(self, category: Optional[str]) -> "QueryState":
        return replace(self, category=category or None, page=1)

    def with_sort(self, sort_key: Union[SortKey, str, None]) -> "QueryState":
        return replace(self, sort_key=SortKey.parse(sort_key), page=1)

    def next_page(self) -> "QueryState":
        return replace(self, page=self.page + 1)


@dataclass(frozen=True)
class BlogCard:
    """Display-ready view of a BlogPost, with all defaults applied."""
    title: str
    excerpt: str
    author: str
    category: str
    reading_time: float
    published: str
    image: Optional[str] = None

    @property
    def reading_time_label(self) -> str:
        minutes = self.reading_time
        if isinstance(minutes, float) and minutes.is_integer():
            minutes = int(minutes)
        return f"{minutes} min read"
