"""
Orchestrate: fan out three fetches, fan in once all succeeded, join.

    from postfan import orchestrate as O

    agg = O.Aggregator(fetcher, sources, policy)
    result = await agg.run(O.Strategy.POOL)    # Result[list[PostResult], AggregationError]
    result = await agg.run(O.Strategy.GRAPH)   # same data, same result

Strategies:
    POOL   bounded task pool, first Error cancels the rest
    GRAPH  nodnod graph: PostsNode, UsersNode, CommentsNode → JoinNode
"""

from postfan.orchestrate._aggregator import (
    Strategy,
    Aggregator,
)
from postfan.orchestrate._pool import (
    gather_fail_fast,
    run_pool,
)
from postfan.orchestrate._graph import (
    CompiledJoin,
    compile_join,
    run_graph,
)
from postfan.orchestrate._nodes import (
    PostsNode,
    UsersNode,
    CommentsNode,
    JoinNode,
)

__all__ = (
    "Strategy",
    "Aggregator",
    "gather_fail_fast",
    "run_pool",
    "CompiledJoin",
    "compile_join",
    "run_graph",
    "PostsNode",
    "UsersNode",
    "CommentsNode",
    "JoinNode",
)
