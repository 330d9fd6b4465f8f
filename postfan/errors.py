"""
Errors: everything that can abort an aggregation.

    AggregationError
    ├── TransportError        upstream unreachable or non-2xx
    │   └── FetchTimeoutError upstream too slow
    ├── DecodeError           body is not an array of records
    └── JoinIntegrityError    post references an unknown user

Instances are not frozen: add_note() and contextlib write to them.
"""

from __future__ import annotations

from dataclasses import dataclass


class AggregationError(Exception):
    """Base for all aggregation failures."""


@dataclass(slots=True)
class TransportError(AggregationError):
    url: str
    reason: str
    status: int | None = None

    def __str__(self) -> str:
        if self.status is not None:
            return f"GET {self.url} failed with HTTP {self.status}: {self.reason}"
        return f"GET {self.url} failed: {self.reason}"


@dataclass(slots=True)
class FetchTimeoutError(TransportError):
    seconds: float = 0.0

    def __str__(self) -> str:
        return f"GET {self.url} timed out after {self.seconds}s"


@dataclass(slots=True)
class DecodeError(AggregationError):
    url: str
    reason: str

    def __str__(self) -> str:
        return f"GET {self.url} returned an unexpected body: {self.reason}"


@dataclass(slots=True)
class JoinIntegrityError(AggregationError):
    post_id: int
    user_id: int

    def __str__(self) -> str:
        return f"post:{self.post_id} references unknown user:{self.user_id}"


__all__ = (
    "AggregationError",
    "TransportError",
    "FetchTimeoutError",
    "DecodeError",
    "JoinIntegrityError",
)
