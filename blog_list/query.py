from __future__ import annotations

import locale
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .models import BlogPost, QueryState, SortKey


def _matches_search(post: BlogPost, term: str) -> bool:
    return term in post.title.lower()


def _date_key(post: BlogPost) -> Tuple[int, float]:
    # Valid dates first (newest first), then every undated post in incoming order
    if post.published_at is None:
        return (1, 0.0)
    return (0, -post.published_at.timestamp())


def _reading_time_key(post: BlogPost) -> float:
    return post.reading_time or 0


def _category_key(post: BlogPost) -> str:
    name = post.category or ""
    try:
        return locale.strxfrm(name)
    except ValueError:
        # strxfrm rejects embedded NULs
        return locale.strxfrm(name.replace("\x00", ""))


_SORT_KEYS = {
    SortKey.DATE: _date_key,
    SortKey.READING_TIME: _reading_time_key,
    SortKey.CATEGORY: _category_key,
}


def derive_view(
    master: Sequence[BlogPost],
    search_term: str = "",
    category: Optional[str] = None,
    sort_key: SortKey = SortKey.NONE,
) -> List[BlogPost]:
    """
    Derive the displayed view from the master collection.

    Pipeline: search (title, case-insensitive) → category (exact) → sort (stable).
    Returns a new list; `master` is never modified.
    """
    items = list(master)

    term = (search_term or "").lower()
    if term:
        items = [p for p in items if _matches_search(p, term)]

    if category:
        items = [p for p in items if p.category == category]

    key = _SORT_KEYS.get(SortKey.parse(sort_key))
    if key is not None:
        items = sorted(items, key=key)

    return items


def derive_view_for(master: Sequence[BlogPost], state: QueryState) -> List[BlogPost]:
    return derive_view(master, state.search_term, state.category, state.sort_key)


def categories(master: Iterable[BlogPost]) -> List[str]:
    """Distinct non-empty categories in the order they first appear."""
    seen: Set[str] = set()
    out: List[str] = []
    for post in master:
        if post.category and post.category not in seen:
            seen.add(post.category)
            out.append(post.category)
    return out
