"""
Upstream schemas: the JSON shapes served by the three sources.

Each schema knows how to become a domain record via to_domain().
Unknown fields are ignored.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from postfan.domain import Post, User, Comment


class Schema[T](Protocol):
    def to_domain(self) -> T: ...


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class PostIn(_Upstream):
    id: int
    user_id: int = Field(alias="userId")
    title: str
    body: str = ""

    def to_domain(self) -> Post:
        return Post(id=self.id, user_id=self.user_id, title=self.title, body=self.body)


class UserIn(_Upstream):
    id: int
    name: str
    username: str = ""
    email: str = ""

    def to_domain(self) -> User:
        return User(id=self.id, name=self.name, username=self.username, email=self.email)


class CommentIn(_Upstream):
    post_id: int = Field(alias="postId")
    id: int | None = None
    email: str = ""
    body: str = ""

    def to_domain(self) -> Comment:
        return Comment(post_id=self.post_id, id=self.id, email=self.email, body=self.body)


__all__ = ("Schema", "PostIn", "UserIn", "CommentIn")
