"""
Normalized error type for every Zoho Books call.

Every failure path in the transport core and the token manager converges to
``ZohoBooksError`` before it reaches a caller:

- ``http_status > 0``: the remote service answered with a non-2xx status
- ``http_status == 0`` and ``cause == NETWORK``: the request left the process
  but no response arrived (timeout, DNS, connection reset)
- ``http_status == 0`` and ``cause == CONSTRUCTION``: the request never left
  the process (bad body serialization, invalid URL)
- ``http_status == 0`` and ``cause == PRECONDITION``: a local check failed
  before any dispatch (e.g. refresh without a refresh token)

``DECODE`` marks a 2xx reply whose body could not be read, either invalid JSON
or a shape the record cannot hold. It carries the response status.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


NETWORK_ERROR_MESSAGE = "network error: no response received"


class ErrorCause(str, Enum):
    REMOTE = "REMOTE"
    NETWORK = "NETWORK"
    CONSTRUCTION = "CONSTRUCTION"
    PRECONDITION = "PRECONDITION"
    DECODE = "DECODE"


class ZohoBooksError(Exception):
    def __init__(
        self,
        message: str,
        http_status: int = 0,
        details: Any = None,
        *,
        cause: Optional[ErrorCause] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.details = details
        if cause is None:
            cause = ErrorCause.REMOTE if http_status > 0 else ErrorCause.CONSTRUCTION
        self.cause = cause

    @property
    def is_remote(self) -> bool:
        return self.http_status > 0

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "http_status": self.http_status,
            "details": self.details,
            "cause": self.cause.value,
        }

    def __repr__(self) -> str:
        return f"ZohoBooksError(message={self.message!r}, http_status={self.http_status}, cause={self.cause.value})"
