from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

from dateutil import parser as date_parser

from .models import BlogPost

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Convert a published_date string to a timezone-aware UTC datetime.
    Any format dateutil understands is accepted (ISO-8601, RFC 2822,
    "Jan 15, 2024", "2024/01/15", ...). Naive values are taken as UTC.
    Returns None when the string does not parse or falls outside the
    representable range once converted to UTC.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = date_parser.parse(value.strip())
    except (ValueError, OverflowError):
        return None

    try:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def _to_minutes(value: Any) -> Optional[float]:
    # bool is an int subclass; a flag is not a duration
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        minutes = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            minutes = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(minutes) or math.isinf(minutes):
        return None
    return minutes


def _optional_str(entry: Dict[str, Any], key: str) -> Optional[str]:
    val = entry.get(key)
    if val is None:
        return None
    val = str(val)
    return val if val else None


def parse_record(entry: Dict[str, Any]) -> BlogPost:
    """
    Map a raw feed object to a BlogPost.
    Fields: title, content, category, reading_time, published_date, author, image
    """
    published_date = entry.get("published_date")
    if published_date is not None and not isinstance(published_date, str):
        published_date = str(published_date)

    return BlogPost(
        title=str(entry.get("title") or ""),
        content=str(entry.get("content") or ""),
        category=_optional_str(entry, "category"),
        reading_time=_to_minutes(entry.get("reading_time")),
        published_date=published_date,
        author=_optional_str(entry, "author"),
        image=_optional_str(entry, "image"),
        published_at=parse_timestamp(published_date),
    )


def load_blog_posts(records: Iterable[Any]) -> Tuple[BlogPost, ...]:
    """
    Parse a decoded feed array into the immutable master collection.

    Entries that are not JSON objects are skipped; fields are never validated
    beyond their type, so one bad record cannot reject the whole feed.
    """
    posts = []
    for index, entry in enumerate(records):
        if not isinstance(entry, dict):
            logger.warning("Skipping blog record %d: expected an object, got %s", index, type(entry).__name__)
            continue
        posts.append(parse_record(entry))
    return tuple(posts)
