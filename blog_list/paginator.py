from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

PAGE_SIZE = 10


def _check(page: int, page_size: int) -> None:
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


def paginate(view: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> List[T]:
    """
    Return the first `page * page_size` items of the view.

    Pages accumulate: page 2 holds items 1-20, not 11-20.
    """
    _check(page, page_size)
    return list(view[: page * page_size])


def has_more(view: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> bool:
    _check(page, page_size)
    return len(view) > page * page_size
