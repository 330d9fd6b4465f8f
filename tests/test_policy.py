"""Policies and source configuration."""

from __future__ import annotations

from datetime import timedelta

import pytest

from postfan import policy as P
from postfan.config import JSONPLACEHOLDER, Sources


def test_default_policy() -> None:
    pol = P.Policy()
    assert pol.timeout.seconds == 10.0
    assert pol.parallel.max_concurrent == P.MIN_WORKERS


def test_later_parts_override_earlier() -> None:
    pol = P.policy(P.timeout(1.0), P.parallel_max(8), P.timeout(2.5))
    assert pol.timeout.duration == timedelta(seconds=2.5)
    assert pol.parallel.max_concurrent == 8


def test_policy_without_parts_is_default() -> None:
    assert P.policy() == P.Policy()


@pytest.mark.parametrize("workers", [0, 1, 2])
def test_pool_too_small_for_three_fetches(workers: int) -> None:
    with pytest.raises(ValueError, match="cannot hold"):
        P.parallel_max(workers)


@pytest.mark.parametrize("seconds", [0, -1.0])
def test_timeout_must_be_positive(seconds: float) -> None:
    with pytest.raises(ValueError, match="positive"):
        P.timeout(seconds)


def test_default_sources_point_at_jsonplaceholder() -> None:
    src = Sources()
    assert src.posts == f"{JSONPLACEHOLDER}/posts"
    assert src.users == f"{JSONPLACEHOLDER}/users"
    assert src.comments == f"{JSONPLACEHOLDER}/comments"


def test_sources_at_strips_trailing_slash() -> None:
    assert Sources.at("http://x.test/api/") == Sources(
        posts="http://x.test/api/posts",
        users="http://x.test/api/users",
        comments="http://x.test/api/comments",
    )
