"""HTTP surface: /posts and /posts/alt."""

from __future__ import annotations

from collections.abc import Iterator
from http import HTTPStatus

import httpx
import pytest
from fastapi.testclient import TestClient

from postfan import policy as P
from postfan.app import build_application, create_app, upstream_client
from postfan.config import Sources
from postfan.fetch import HttpFetcher
from postfan.orchestrate import Aggregator, Strategy
from tests._upstream import BASE, USERS, FakeUpstream, corrupt_gzip, redirect, stalled

ROUTES = pytest.mark.parametrize("path", ["/posts", "/posts/alt"])

BODY = [
    {"id": 1, "title": "sunt aut facere", "authorName": "Leanne Graham", "reviewCount": 2},
    {"id": 2, "title": "qui est esse", "authorName": "Ervin Howell", "reviewCount": 0},
    {"id": 3, "title": "ea molestias quasi", "authorName": "Leanne Graham", "reviewCount": 1},
]


@pytest.fixture
def api(upstream: FakeUpstream) -> Iterator[TestClient]:
    app = create_app(
        sources=Sources.at(BASE),
        policy=P.policy(P.timeout(0.2)),
        client=upstream.client(follow_redirects=True),
    )
    with TestClient(app) as client:
        yield client


@ROUTES
def test_posts_body(api: TestClient, path: str) -> None:
    response = api.get(path)
    assert response.status_code == HTTPStatus.OK
    assert response.json() == BODY


def test_both_routes_serve_identical_bodies(api: TestClient) -> None:
    assert api.get("/posts").content == api.get("/posts/alt").content


@ROUTES
def test_upstream_http_error_is_bad_gateway(
    api: TestClient, upstream: FakeUpstream, path: str
) -> None:
    upstream.routes["/comments"] = httpx.Response(HTTPStatus.INTERNAL_SERVER_ERROR)
    response = api.get(path)
    assert response.status_code == HTTPStatus.BAD_GATEWAY
    assert response.json()["error"] == "TransportError"


@ROUTES
def test_upstream_unreachable_is_bad_gateway(
    api: TestClient, upstream: FakeUpstream, path: str
) -> None:
    upstream.routes["/posts"] = httpx.ConnectError("refused")
    assert api.get(path).status_code == HTTPStatus.BAD_GATEWAY


@ROUTES
def test_upstream_timeout_is_gateway_timeout(
    api: TestClient, upstream: FakeUpstream, path: str
) -> None:
    upstream.routes["/users"] = stalled
    response = api.get(path)
    assert response.status_code == HTTPStatus.GATEWAY_TIMEOUT
    assert response.json()["error"] == "FetchTimeoutError"


@ROUTES
def test_undecodable_upstream_is_internal_error(
    api: TestClient, upstream: FakeUpstream, path: str
) -> None:
    upstream.routes["/posts"] = [{"id": 1}]
    response = api.get(path)
    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.json()["error"] == "DecodeError"


@ROUTES
def test_missing_author_is_internal_error(
    api: TestClient, upstream: FakeUpstream, path: str
) -> None:
    upstream.routes["/users"] = USERS[:1]
    response = api.get(path)
    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.json() == {
        "error": "JoinIntegrityError",
        "detail": "post:2 references unknown user:2",
    }


def test_routes_are_documented(api: TestClient) -> None:
    paths = api.get("/openapi.json").json()["paths"]
    assert set(paths) == {"/posts", "/posts/alt"}
    assert {"500", "502", "504"} <= set(paths["/posts"]["get"]["responses"])


def test_build_application_mounts_both_strategies(upstream: FakeUpstream) -> None:
    app = build_application(Aggregator(HttpFetcher(upstream.client())))
    assert app.paths() == ["/posts", "/posts/alt"]
    assert [e.aggregator.strategy for e in app.endpoints] == [Strategy.POOL, Strategy.GRAPH]


@ROUTES
def test_redirect_loop_is_bad_gateway(api: TestClient, upstream: FakeUpstream, path: str) -> None:
    upstream.routes["/posts"] = redirect(HTTPStatus.FOUND, "/posts")
    response = api.get(path)
    assert response.status_code == HTTPStatus.BAD_GATEWAY
    assert response.json()["error"] == "TransportError"


@ROUTES
def test_corrupt_content_encoding_is_internal_error(
    api: TestClient, upstream: FakeUpstream, path: str
) -> None:
    upstream.routes["/users"] = corrupt_gzip
    response = api.get(path)
    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert response.json()["error"] == "DecodeError"


def test_owned_client_leaves_timeout_to_policy() -> None:
    client = upstream_client()
    assert client.timeout == httpx.Timeout(None)
    assert client.follow_redirects
