from dataclasses import dataclass
from typing import Protocol, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from postfan.domain import PostResult
from postfan.errors import AggregationError


DomainT_contra = TypeVar("DomainT_contra", contravariant=True)


class FromDomain(Protocol[DomainT_contra]):
    @classmethod
    def from_domain(cls, dom: DomainT_contra) -> "FromDomain[DomainT_contra]": ...


class FromError(Protocol):
    @classmethod
    def from_error(cls, err: AggregationError) -> "FromError": ...


class PostResultOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    author_name: str = Field(alias="authorName")
    review_count: int = Field(alias="reviewCount")

    @classmethod
    def from_domain(cls, dom: PostResult) -> Self:
        return cls(
            id=dom.id,
            title=dom.title,
            author_name=dom.author_name,
            review_count=dom.review_count,
        )


class ErrorOut(BaseModel):
    error: str
    detail: str

    @classmethod
    def from_error(cls, err: AggregationError) -> Self:
        return cls(error=type(err).__name__, detail=str(err))


@dataclass(frozen=True, slots=True)
class ResponseCodec:
    """How one PostResult and one failure look on the wire."""
    item: type[FromDomain[PostResult]] = PostResultOut
    error: type[FromError] = ErrorOut
