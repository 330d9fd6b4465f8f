"""
Join: posts × users × comments → PostResult.

    results = join_posts(posts, users, comments)

Output order is the order of `posts`. The author is mandatory,
the comment count is not.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from postfan.domain import Post, User, Comment, PostResult
from postfan.errors import JoinIntegrityError


def index_users(users: Iterable[User]) -> dict[int, User]:
    """User.id → User. On duplicate ids the last one wins."""
    return {user.id: user for user in users}


def count_comments(comments: Iterable[Comment]) -> Counter[int]:
    """Comment.post_id → number of comments on that post."""
    return Counter(comment.post_id for comment in comments)


def join_post(
    post: Post,
    users: Mapping[int, User],
    counts: Mapping[int, int],
) -> PostResult:
    author = users.get(post.user_id)
    if author is None:
        raise JoinIntegrityError(post.id, post.user_id)
    return PostResult(
        id=post.id,
        title=post.title,
        author_name=author.name,
        review_count=counts.get(post.id, 0),
    )


def join_posts(
    posts: Sequence[Post],
    users: Iterable[User],
    comments: Iterable[Comment],
) -> list[PostResult]:
    """
    Denormalize posts with their author name and comment count.

    Raises JoinIntegrityError on the first post whose author is missing;
    no partial list is returned.
    """
    by_id = index_users(users)
    counts = count_comments(comments)
    return [join_post(post, by_id, counts) for post in posts]


__all__ = ("index_users", "count_comments", "join_post", "join_posts")
