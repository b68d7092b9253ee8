"""
blog_list

Client-side list engine for a blog feed: fetch the whole collection once, then
search, filter, sort and page through it locally.

Core ideas:
- Input: a URL serving a JSON array of blog posts
- Process: load → search (title) → category filter → sort → paginate ("load more")
- Output: BlogCard view-models handed to a BlogListView

Example
-------
import asyncio
from blog_list import BlogList

class PrintView:
    def display(self, cards):
        if not cards:
            print("No blogs found matching your criteria.")
        for card in cards:
            print(card.published, card.title)
    def show_loading(self): print("Loading...")
    def hide_loading(self): pass
    def show_error(self, message): print(message)
    def clear(self): pass

blogs = BlogList(PrintView())
asyncio.run(blogs.init())
blogs.set_category("Startups")
blogs.set_sort_key("date")
"""
from .models import BlogCard, BlogPost, QueryState, SortKey
from .exceptions import LoadError, LoadErrorKind
from .query import derive_view
from .paginator import paginate
from .core import BlogList

__all__ = [
    "BlogCard",
    "BlogList",
    "BlogPost",
    "LoadError",
    "LoadErrorKind",
    "QueryState",
    "SortKey",
    "derive_view",
    "paginate",
]
