"""Aggregation errors under ordinary exception handling."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from postfan.errors import FetchTimeoutError, JoinIntegrityError, TransportError
from postfan.orchestrate import Aggregator, Strategy
from tests._upstream import USERS, FakeUpstream

STRATEGIES = pytest.mark.parametrize("strategy", list(Strategy))


@contextmanager
def span() -> Iterator[None]:
    yield


@STRATEGIES
async def test_error_passes_through_context_manager(
    aggregator: Aggregator, upstream: FakeUpstream, strategy: Strategy
) -> None:
    upstream.routes["/users"] = USERS[:1]
    with pytest.raises(JoinIntegrityError) as exc:
        with span():
            await aggregator.aggregate(strategy)
    assert exc.value == JoinIntegrityError(post_id=2, user_id=2)


@STRATEGIES
async def test_error_accepts_notes(
    aggregator: Aggregator, upstream: FakeUpstream, strategy: Strategy
) -> None:
    upstream.routes["/users"] = USERS[:1]
    with pytest.raises(JoinIntegrityError) as exc:
        try:
            await aggregator.aggregate(strategy)
        except JoinIntegrityError as e:
            e.add_note(f"strategy={strategy}")
            raise
    assert exc.value.__notes__ == [f"strategy={strategy}"]


def test_messages() -> None:
    assert str(TransportError("http://u/posts", "Bad Gateway", 502)) == (
        "GET http://u/posts failed with HTTP 502: Bad Gateway"
    )
    assert str(TransportError("http://u/posts", "ConnectError")) == (
        "GET http://u/posts failed: ConnectError"
    )
    assert str(FetchTimeoutError("http://u/posts", "timed out", seconds=2.0)) == (
        "GET http://u/posts timed out after 2.0s"
    )
    assert isinstance(FetchTimeoutError("u", "r"), TransportError)
