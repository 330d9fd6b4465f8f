"""
postfan: concurrent fetch-and-join of posts, users and comments.

    from postfan import fetch as F        # Upstream GET + decode
    from postfan import orchestrate as O  # Fan-out / fan-in strategies
    from postfan import policy as P       # Timeouts, pool size

    agg = O.Aggregator(F.HttpFetcher(client), policy=P.policy(P.timeout(5.0)))
    posts = await agg.aggregate()
"""

from postfan import fetch
from postfan import join
from postfan import orchestrate
from postfan import policy
from postfan import lift
from postfan._types import (
    Fetched,
    Outcome,
)
from postfan.config import Sources
from postfan.domain import Post, User, Comment, PostResult
from postfan.errors import (
    AggregationError,
    TransportError,
    FetchTimeoutError,
    DecodeError,
    JoinIntegrityError,
)
from postfan.orchestrate import Aggregator, Strategy

__version__ = "0.1.0"

__all__ = (
    "fetch",
    "join",
    "orchestrate",
    "policy",
    "lift",
    "Fetched",
    "Outcome",
    "Sources",
    "Post",
    "User",
    "Comment",
    "PostResult",
    "AggregationError",
    "TransportError",
    "FetchTimeoutError",
    "DecodeError",
    "JoinIntegrityError",
    "Aggregator",
    "Strategy",
)
