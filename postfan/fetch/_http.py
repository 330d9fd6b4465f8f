"""HTTP fetcher over a shared httpx.AsyncClient."""

from __future__ import annotations

import logging
from functools import cache
from typing import Any, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from postfan.errors import DecodeError, FetchTimeoutError, TransportError
from postfan.fetch._schemas import Schema

LOG = logging.getLogger("postfan.fetch")


class Fetcher(Protocol):
    """One GET, decoded into a list of domain records."""

    async def fetch[T](self, url: str, schema: type[Schema[T]]) -> list[T]: ...


@cache
def _array_of(schema: type[Any]) -> TypeAdapter[list[Any]]:
    return TypeAdapter(list[schema])


def decode[T](url: str, body: bytes, schema: type[Schema[T]]) -> list[T]:
    """
    Decode a JSON array body into domain records.

    Raises
    ------
    DecodeError
        Body is not JSON, not an array, or an element has the wrong shape.
    """
    try:
        items = _array_of(schema).validate_json(body)
    except ValidationError as e:
        raise DecodeError(url, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e
    return [item.to_domain() for item in items]


class HttpFetcher:
    """
    Fetcher backed by httpx.

    The client is owned by the caller. The per-fetch bound comes from
    the policy; a timeout enforced by the client itself still surfaces
    as FetchTimeoutError.
    """

    __slots__ = ("_client",)

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch[T](self, url: str, schema: type[Schema[T]]) -> list[T]:
        LOG.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.DecodingError as e:
            LOG.warning("GET %s sent an undecodable body: %r", url, e)
            raise DecodeError(url, f"content decoding failed: {e}") from e
        except httpx.TimeoutException as e:
            LOG.warning("GET %s timed out in the client: %r", url, e)
            raise FetchTimeoutError(
                url, type(e).__name__, seconds=self._client.timeout.read or 0.0
            ) from e
        except httpx.RequestError as e:
            LOG.warning("GET %s failed: %r", url, e)
            raise TransportError(url, type(e).__name__) from e

        # Redirects the client did not follow count as failures too.
        if not response.is_success:
            LOG.warning("GET %s returned HTTP %d", url, response.status_code)
            raise TransportError(url, response.reason_phrase, response.status_code)

        records = decode(url, response.content, schema)
        LOG.debug("GET %s -> %d record(s)", url, len(records))
        return records


__all__ = ("Fetcher", "HttpFetcher", "decode")
