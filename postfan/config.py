"""Upstream source locations."""

from __future__ import annotations

from dataclasses import dataclass

JSONPLACEHOLDER = "https://jsonplaceholder.typicode.com"


@dataclass(frozen=True, slots=True)
class Sources:
    """Where each of the three collections is fetched from."""
    posts: str = f"{JSONPLACEHOLDER}/posts"
    users: str = f"{JSONPLACEHOLDER}/users"
    comments: str = f"{JSONPLACEHOLDER}/comments"

    @classmethod
    def at(cls, base_url: str) -> Sources:
        """All three collections under one base URL."""
        base = base_url.rstrip("/")
        return cls(posts=f"{base}/posts", users=f"{base}/users", comments=f"{base}/comments")


__all__ = ("JSONPLACEHOLDER", "Sources")
