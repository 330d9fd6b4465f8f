"""
Graph nodes: three independent fetches feeding one join.

    PostsNode ─┐
    UsersNode ─┼─→ JoinNode
    CommentsNode ┘

The fetch nodes share no dependency, so nodnod runs them concurrently.
A node that fails raises; the join never starts.
"""

from nodnod import scalar_node as node

from postfan.config import Sources
from postfan.domain import Post, User, Comment, PostResult
from postfan.fetch import Fetcher, PostIn, UserIn, CommentIn, fetch_source
from postfan.join import join_posts
from postfan.lift import unwrap_or_raise
from postfan.policy import Policy


@node
class PostsNode:
    def __init__(self, data: list[Post]) -> None:
        self.data = data

    @classmethod
    async def __compose__(cls, sources: Sources, fetcher: Fetcher, policy: Policy) -> "PostsNode":
        result = await fetch_source(fetcher, sources.posts, PostIn, seconds=policy.timeout.seconds)
        return cls(unwrap_or_raise(result))


@node
class UsersNode:
    def __init__(self, data: list[User]) -> None:
        self.data = data

    @classmethod
    async def __compose__(cls, sources: Sources, fetcher: Fetcher, policy: Policy) -> "UsersNode":
        result = await fetch_source(fetcher, sources.users, UserIn, seconds=policy.timeout.seconds)
        return cls(unwrap_or_raise(result))


@node
class CommentsNode:
    def __init__(self, data: list[Comment]) -> None:
        self.data = data

    @classmethod
    async def __compose__(cls, sources: Sources, fetcher: Fetcher, policy: Policy) -> "CommentsNode":
        result = await fetch_source(fetcher, sources.comments, CommentIn, seconds=policy.timeout.seconds)
        return cls(unwrap_or_raise(result))


@node
class JoinNode:
    """Runs only after all three fetch nodes resolved."""

    def __init__(self, data: list[PostResult]) -> None:
        self.data = data

    @classmethod
    def __compose__(
        cls,
        posts: PostsNode,
        users: UsersNode,
        comments: CommentsNode,
    ) -> "JoinNode":
        return cls(join_posts(posts.data, users.data, comments.data))


__all__ = ("PostsNode", "UsersNode", "CommentsNode", "JoinNode")
