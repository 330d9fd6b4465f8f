"""
Aggregator: the single entry point for fetch-and-join.

Both strategies resolve to the same Outcome for the same upstream data.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field, replace

from kungfu import Ok, Error, LazyCoroResult

from postfan._types import Outcome
from postfan.config import Sources
from postfan.domain import PostResult
from postfan.errors import AggregationError
from postfan.fetch import Fetcher
from postfan.lift import unwrap_or_raise
from postfan.orchestrate._graph import run_graph
from postfan.orchestrate._pool import run_pool
from postfan.policy import Policy

LOG = logging.getLogger("postfan.orchestrate")


class Strategy(enum.StrEnum):
    POOL = "pool"
    """Bounded task pool, first error wins."""
    GRAPH = "graph"
    """Compiled dependency graph, first raised error wins."""


@dataclass(frozen=True, slots=True)
class Aggregator:
    """
    Fetches posts, users and comments concurrently and joins them.

    Example:
        agg = Aggregator(HttpFetcher(client))
        result = await agg.run()                   # Result
        posts = await agg.aggregate(Strategy.GRAPH)  # raises on failure
    """
    fetcher: Fetcher
    sources: Sources = field(default_factory=Sources)
    policy: Policy = field(default_factory=Policy)
    strategy: Strategy = Strategy.POOL

    def using(self, strategy: Strategy) -> Aggregator:
        """Same aggregator, different default strategy."""
        return replace(self, strategy=strategy)

    async def run(self, strategy: Strategy | None = None) -> Outcome:
        chosen = strategy or self.strategy
        started = time.perf_counter()

        match chosen:
            case Strategy.POOL:
                result = await run_pool(self.fetcher, self.sources, self.policy)
            case Strategy.GRAPH:
                result = await run_graph(self.fetcher, self.sources, self.policy)

        elapsed_ms = (time.perf_counter() - started) * 1000
        match result:
            case Ok(posts):
                LOG.info("aggregated %d post(s) via %s in %.1fms", len(posts), chosen, elapsed_ms)
            case Error(e):
                LOG.warning("aggregation via %s failed after %.1fms: %s", chosen, elapsed_ms, e)
        return result

    async def aggregate(self, strategy: Strategy | None = None) -> list[PostResult]:
        """Like run(), but raises the AggregationError instead of returning it."""
        return unwrap_or_raise(await self.run(strategy))

    def __call__(
        self, strategy: Strategy | None = None
    ) -> LazyCoroResult[list[PostResult], AggregationError]:
        """Lazy run (returns awaitable)."""
        async def inner() -> Outcome:
            return await self.run(strategy)
        return LazyCoroResult(inner)


__all__ = ("Strategy", "Aggregator")
