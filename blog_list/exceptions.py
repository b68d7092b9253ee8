from __future__ import annotations

from enum import Enum
from typing import Optional


class LoadErrorKind(str, Enum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"


class LoadError(Exception):
    """Raised when the blog collection cannot be fetched or decoded."""

    def __init__(
        self,
        message: str,
        *,
        kind: LoadErrorKind,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status = status
        self.cause = cause
