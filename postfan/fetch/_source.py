"""
fetch_source(): one upstream fetch as a lazy, time-bounded result.
"""

from __future__ import annotations

import combinators as C

from postfan._types import Fetched
from postfan.errors import AggregationError, FetchTimeoutError
from postfan.fetch._http import Fetcher
from postfan.fetch._schemas import Schema
from postfan.lift import from_awaitable


def fetch_source[T](
    fetcher: Fetcher,
    url: str,
    schema: type[Schema[T]],
    *,
    seconds: float,
) -> Fetched[T]:
    """
    Lazy fetch of one collection.

    Nothing happens until awaited. Exceeding `seconds` yields
    FetchTimeoutError in the error channel.

    Example:
        posts = await fetch_source(fetcher, sources.posts, PostIn, seconds=5.0)
    """

    def widen(err: AggregationError | C.TimeoutError) -> AggregationError:
        if isinstance(err, C.TimeoutError):
            return FetchTimeoutError(url, "timed out", seconds=err.seconds)
        return err

    return C.timeout(
        from_awaitable(lambda: fetcher.fetch(url, schema)),
        seconds=seconds,
    ).map_err(widen)


__all__ = ("fetch_source",)
