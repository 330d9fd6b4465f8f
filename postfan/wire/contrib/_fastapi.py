from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

import fastapi
from fastapi.responses import JSONResponse
from kungfu import Ok, Error

from postfan.errors import AggregationError, FetchTimeoutError, TransportError
from postfan.orchestrate import Aggregator
from postfan.wire._app import Application
from postfan.wire._endpoint import Endpoint
from postfan.wire._types import Codec
from postfan.wire.triggers.http import Path

type Lifespan = Callable[[fastapi.FastAPI], AbstractAsyncContextManager[None]]


def status_for(err: AggregationError) -> int:
    """Upstream trouble is a gateway problem; everything else is ours."""
    match err:
        case FetchTimeoutError():
            return fastapi.status.HTTP_504_GATEWAY_TIMEOUT
        case TransportError():
            return fastapi.status.HTTP_502_BAD_GATEWAY
        case _:
            return fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR


def compile_to_fastapi_route(
    endp: Endpoint,
) -> list[tuple[str, Path, Any, dict[str, Any]]]:  # (method, path, route_func, route_kwargs)
    routes: list[tuple[str, Path, Any, dict[str, Any]]] = []

    for trigger, codec in endp.exposures:

        def make_handler(codec: Codec, aggregator: Aggregator) -> Any:
            item_cls = codec.item
            error_cls = codec.error

            async def _route_handler() -> Any:
                result = await aggregator.run()
                match result:
                    case Ok(posts):
                        return [item_cls.from_domain(post) for post in posts]
                    case Error(e):
                        return JSONResponse(
                            status_code=status_for(e),
                            content=error_cls.from_error(e).model_dump(),  # type: ignore[attr-defined]
                        )

            _route_handler.__annotations__ = {"return": list[item_cls]}  # type: ignore[valid-type]
            return _route_handler

        handler = make_handler(codec, endp.aggregator)
        route_kwargs: dict[str, Any] = {
            "summary": trigger.summary,
            "responses": {
                fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": codec.error},
                fastapi.status.HTTP_502_BAD_GATEWAY: {"model": codec.error},
                fastapi.status.HTTP_504_GATEWAY_TIMEOUT: {"model": codec.error},
            },
        }

        routes.append((trigger.method.upper(), trigger.path, handler, route_kwargs))

    return routes


def add_endpoint_to_app(
    app: fastapi.FastAPI,
    endp: Endpoint,
) -> None:
    for method, path, handler, route_kwargs in compile_to_fastapi_route(endp):
        app.add_api_route(path, handler, methods=[method], **route_kwargs)


def from_application(app: Application, lifespan: Lifespan | None = None) -> fastapi.FastAPI:
    f_app = fastapi.FastAPI(title=app.title, lifespan=lifespan)

    for endp in app.endpoints:
        add_endpoint_to_app(f_app, endp)

    return f_app
