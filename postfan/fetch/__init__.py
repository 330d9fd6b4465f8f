"""
Fetch: one GET per upstream collection, decoded into domain records.

    from postfan import fetch as F

    async with httpx.AsyncClient() as client:
        fetcher = F.HttpFetcher(client)
        posts = await fetcher.fetch(url, F.PostIn)             # raises
        posts = await F.fetch_source(fetcher, url, F.PostIn,   # Result
                                     seconds=5.0)
"""

from postfan.fetch._schemas import (
    Schema,
    PostIn,
    UserIn,
    CommentIn,
)
from postfan.fetch._http import (
    Fetcher,
    HttpFetcher,
    decode,
)
from postfan.fetch._source import fetch_source

__all__ = (
    "Schema",
    "PostIn",
    "UserIn",
    "CommentIn",
    "Fetcher",
    "HttpFetcher",
    "decode",
    "fetch_source",
)
