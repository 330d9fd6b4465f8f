"""
Application: the HTTP surface.

    GET /posts      Strategy.POOL
    GET /posts/alt  Strategy.GRAPH

Both routes return the same body for the same upstream data.

Run: uvicorn --factory postfan.app:create_app
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import fastapi
import httpx

from postfan.config import Sources
from postfan.fetch import HttpFetcher
from postfan.orchestrate import Aggregator, Strategy
from postfan.policy import Policy
from postfan.wire import Application, ResponseCodec, application, endpoint
from postfan.wire.contrib import fastapi as wire_fastapi
from postfan.wire.triggers import http

LOG = logging.getLogger("postfan.app")


def upstream_client() -> httpx.AsyncClient:
    """Client for the upstream sources. Unbounded, so TimeoutPolicy alone bounds a fetch."""
    return httpx.AsyncClient(follow_redirects=True, timeout=None)


def build_application(aggregator: Aggregator, codec: ResponseCodec | None = None) -> Application:
    """Both routes over one aggregator, differing only in strategy."""
    codec = codec or ResponseCodec()
    return application().mount(
        endpoint(aggregator.using(Strategy.POOL)).expose(
            http.get("/posts", summary="Posts with author and review count"),
            codec,
        ),
        endpoint(aggregator.using(Strategy.GRAPH)).expose(
            http.get("/posts/alt", summary="Same as /posts, graph execution"),
            codec,
        ),
    )


def create_app(
    sources: Sources | None = None,
    policy: Policy | None = None,
    client: httpx.AsyncClient | None = None,
) -> fastapi.FastAPI:
    """
    Build the FastAPI app.

    A client passed in stays owned by the caller; otherwise one is
    created here and closed on shutdown.
    """
    owns_client = client is None
    http_client = client if client is not None else upstream_client()

    aggregator = Aggregator(
        fetcher=HttpFetcher(http_client),
        sources=sources or Sources(),
        policy=policy or Policy(),
    )

    @asynccontextmanager
    async def lifespan(_: fastapi.FastAPI) -> AsyncIterator[None]:
        LOG.info("serving posts from %s", aggregator.sources.posts)
        try:
            yield
        finally:
            if owns_client:
                await http_client.aclose()

    return wire_fastapi.from_application(build_application(aggregator), lifespan=lifespan)


__all__ = ("upstream_client", "build_application", "create_app")
