from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .paginator import PAGE_SIZE

DEFAULT_BLOG_DATA_URL = "https://frontend-blog-lyart.vercel.app/blogsData.json"
DEFAULT_FETCH_TIMEOUT_SEC = 10.0
SEARCH_DEBOUNCE_SECONDS = 0.25


@dataclass(frozen=True)
class Settings:
    blog_data_url: str = DEFAULT_BLOG_DATA_URL
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT_SEC
    page_size: int = PAGE_SIZE
    search_debounce: float = SEARCH_DEBOUNCE_SECONDS
    discord_token: Optional[str] = None


def _number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from the environment, after loading a .env file if present.
    Existing environment variables win over .env values.
    """
    load_dotenv(env_file)
    return Settings(
        blog_data_url=os.getenv("BLOG_DATA_URL") or DEFAULT_BLOG_DATA_URL,
        fetch_timeout=_number("BLOG_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT_SEC, float),
        page_size=_number("BLOG_PAGE_SIZE", PAGE_SIZE, int),
        search_debounce=_number("BLOG_SEARCH_DEBOUNCE", SEARCH_DEBOUNCE_SECONDS, float),
        discord_token=os.getenv("DISCORD_BOT_TOKEN"),
    )
