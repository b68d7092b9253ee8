from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

import requests

from .exceptions import LoadError, LoadErrorKind

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 10.0


def fetch_blog_records(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT_SEC,
) -> List[Any]:
    """
    Fetch the blog feed and return its decoded JSON array.

    Raises LoadError on transport failure, non-2xx status, or a body that is
    not a JSON array.
    """
    http = session or requests
    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise LoadError(str(e), kind=LoadErrorKind.NETWORK, cause=e) from e

    if not 200 <= resp.status_code < 300:
        raise LoadError(
            f"Failed to fetch blogs (Status: {resp.status_code})",
            kind=LoadErrorKind.HTTP_STATUS,
            status=resp.status_code,
        )

    try:
        data = resp.json()
    except ValueError as e:
        raise LoadError(
            "Unexpected API response structure",
            kind=LoadErrorKind.MALFORMED_RESPONSE,
            status=resp.status_code,
            cause=e,
        ) from e

    if not isinstance(data, list):
        raise LoadError(
            "Unexpected API response structure",
            kind=LoadErrorKind.MALFORMED_RESPONSE,
            status=resp.status_code,
        )

    logger.debug("Fetched %d blog records from %s", len(data), url)
    return data


async def fetch_blog_records_async(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT_SEC,
) -> List[Any]:
    """Same as fetch_blog_records, run on a worker thread so the event loop keeps going."""
    return await asyncio.to_thread(fetch_blog_records, url, session=session, timeout=timeout)
