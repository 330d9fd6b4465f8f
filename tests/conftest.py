"""Pytest configuration for the postfan test suite."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from postfan import policy as P
from postfan.config import Sources
from postfan.fetch import HttpFetcher
from postfan.orchestrate import Aggregator
from tests._upstream import BASE, FakeUpstream


@pytest.fixture
def upstream() -> FakeUpstream:
    """Upstream serving the default posts/users/comments; tests may edit routes."""
    return FakeUpstream()


@pytest.fixture
async def client(upstream: FakeUpstream) -> AsyncIterator[httpx.AsyncClient]:
    async with upstream.client() as c:
        yield c


@pytest.fixture
def aggregator(client: httpx.AsyncClient) -> Aggregator:
    return Aggregator(
        HttpFetcher(client),
        sources=Sources.at(BASE),
        policy=P.policy(P.timeout(5.0)),
    )
