from __future__ import annotations

from typing import Protocol, Sequence

from .models import BlogCard, BlogPost

EXCERPT_LENGTH = 150
DEFAULT_AUTHOR = "Unknown"
DEFAULT_CATEGORY = "General"
DEFAULT_READING_TIME = 5
INVALID_DATE = "Invalid Date"
NO_RESULTS_MESSAGE = "No blogs found matching your criteria."


class BlogListView(Protocol):
    """
    Render surface for a BlogList.

    `display` is called for every render, including with an empty sequence, in
    which case the view shows a "no results" state of its own.
    """

    def display(self, cards: Sequence[BlogCard]) -> None:  # pragma: no cover - interface
        ...

    def show_loading(self) -> None:  # pragma: no cover - interface
        ...

    def hide_loading(self) -> None:  # pragma: no cover - interface
        ...

    def show_error(self, message: str) -> None:  # pragma: no cover - interface
        ...

    def clear(self) -> None:  # pragma: no cover - interface
        ...


def to_card(post: BlogPost) -> BlogCard:
    published = post.published_at.strftime("%b %d, %Y") if post.published_at else INVALID_DATE
    return BlogCard(
        title=post.title,
        excerpt=post.content[:EXCERPT_LENGTH] + "...",
        author=post.author or DEFAULT_AUTHOR,
        category=post.category or DEFAULT_CATEGORY,
        reading_time=post.reading_time if post.reading_time is not None else DEFAULT_READING_TIME,
        published=published,
        image=post.image,
    )


def format_error(err: BaseException) -> str:
    return f"Error: {err}. Please check the console for details."
