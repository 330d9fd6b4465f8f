"""
Pool strategy: bounded worker pool with first-error-wins collection.

Note: fetches are LazyCoroResult values, so errors arrive as Error(...)
rather than raised exceptions.
"""

from __future__ import annotations

import asyncio
from typing import Any

from kungfu import Result, Ok, Error, LazyCoroResult

from postfan._types import Outcome
from postfan.config import Sources
from postfan.domain import Post, User, Comment
from postfan.errors import AggregationError
from postfan.fetch import Fetcher, PostIn, UserIn, CommentIn, fetch_source
from postfan.join import join_posts
from postfan.lift import from_call
from postfan.policy import Policy


# ═══════════════════════════════════════════════════════════════════════════════
# gather_fail_fast(): Concurrent collection
# ═══════════════════════════════════════════════════════════════════════════════

def gather_fail_fast[E](
    *interps: LazyCoroResult[Any, E],
    concurrency: int,
) -> LazyCoroResult[tuple[Any, ...], E]:
    """
    Run all on a pool of `concurrency` workers, values in input order.

    Resolves to the first Error observed; tasks still running at that
    point are cancelled and their results dropped.
    """

    async def run() -> Result[tuple[Any, ...], E]:
        slots = asyncio.Semaphore(concurrency)

        async def worker(interp: LazyCoroResult[Any, E]) -> Result[Any, E]:
            async with slots:
                return await interp

        tasks = [asyncio.ensure_future(worker(i)) for i in interps]
        try:
            pending: set[asyncio.Future[Result[Any, E]]] = set(tasks)
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for task in tasks:
                    if task in done and isinstance(error := task.result(), Error):
                        return error
            return Ok(tuple(task.result().unwrap() for task in tasks))
        finally:
            unfinished = [task for task in tasks if not task.done()]
            for task in unfinished:
                task.cancel()
            if unfinished:
                await asyncio.gather(*unfinished, return_exceptions=True)

    return LazyCoroResult(run)


# ═══════════════════════════════════════════════════════════════════════════════
# run_pool(): Fetch three, then join
# ═══════════════════════════════════════════════════════════════════════════════

async def run_pool(fetcher: Fetcher, sources: Sources, policy: Policy) -> Outcome:
    seconds = policy.timeout.seconds

    async def join(collections: tuple[Any, ...]) -> Outcome:
        posts: list[Post]
        users: list[User]
        comments: list[Comment]
        posts, users, comments = collections
        return from_call(lambda: join_posts(posts, users, comments))

    fetched: LazyCoroResult[tuple[Any, ...], AggregationError] = gather_fail_fast(
        fetch_source(fetcher, sources.posts, PostIn, seconds=seconds),
        fetch_source(fetcher, sources.users, UserIn, seconds=seconds),
        fetch_source(fetcher, sources.comments, CommentIn, seconds=seconds),
        concurrency=policy.parallel.max_concurrent,
    )
    return await fetched.then(join)


__all__ = ("gather_fail_fast", "run_pool")
