"""
Codecs: convert domain results to transport payloads.

    from postfan.wire.codecs import ResponseCodec, PostResultOut

    # class Item(...): implements from_domain(PostResult)
    # class Failure(...): implements from_error(AggregationError)
    # codec = ResponseCodec(Item, Failure)
"""

from postfan.wire.codecs.posts import (
    ResponseCodec,
    PostResultOut,
    ErrorOut,
    FromDomain,
    FromError,
)

__all__ = (
    "ResponseCodec",
    "PostResultOut",
    "ErrorOut",
    "FromDomain",
    "FromError",
)
