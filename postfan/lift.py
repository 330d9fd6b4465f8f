"""
Lift: moving between raised aggregation errors and Result values.

Only AggregationError crosses into the error channel. Anything else
is a bug and keeps propagating.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable

from kungfu import Result, Ok, Error, LazyCoroResult

from postfan.errors import AggregationError


def from_awaitable[T](
    awaitable_fn: Callable[[], Awaitable[T]],
) -> LazyCoroResult[T, AggregationError]:
    """Lift an async call into LazyCoroResult, capturing AggregationError."""
    async def _run() -> Result[T, AggregationError]:
        try:
            return Ok(await awaitable_fn())
        except AggregationError as e:
            return Error(e)
    return LazyCoroResult(_run)


def from_call[T](fn: Callable[[], T]) -> Result[T, AggregationError]:
    """Synchronous counterpart of from_awaitable."""
    try:
        return Ok(fn())
    except AggregationError as e:
        return Error(e)


def unwrap_or_raise[T](result: Result[T, AggregationError]) -> T:
    """Lower a Result back into a value, raising the captured error."""
    match result:
        case Ok(value):
            return value
        case Error(e):
            raise e


__all__ = (
    "from_awaitable",
    "from_call",
    "unwrap_or_raise",
)
