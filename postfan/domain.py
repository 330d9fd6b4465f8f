"""
Domain: records fetched from upstream and the joined result.

All records are plain frozen containers, created per aggregation
and discarded once the response is produced.
"""

from __future__ import annotations

from dataclasses import dataclass


# ═══════════════════════════════════════════════════════════════════════════════
# Upstream records
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Post:
    id: int
    user_id: int
    title: str
    body: str = ""


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    username: str = ""
    email: str = ""


@dataclass(frozen=True, slots=True)
class Comment:
    post_id: int
    id: int | None = None
    email: str = ""
    body: str = ""


# ═══════════════════════════════════════════════════════════════════════════════
# Derived
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PostResult:
    """One post with its author resolved and its comments counted."""
    id: int
    title: str
    author_name: str
    review_count: int


__all__ = ("Post", "User", "Comment", "PostResult")
