"""
Core types for postfan.

Re-exports from kungfu + aggregation aliases.
"""

from __future__ import annotations

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

from postfan.domain import PostResult
from postfan.errors import AggregationError

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Fetched[T] = LazyCoroResult[list[T], AggregationError]
"""Lazy fetch of one upstream collection."""

type Outcome = Result[list[PostResult], AggregationError]
"""Result of one aggregation: every post joined, or the first failure."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Aliases
    "Fetched",
    "Outcome",
)
