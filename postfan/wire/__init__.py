"""
Wire: expose an aggregator via triggers and codecs.

    from postfan import orchestrate as O
    from postfan.wire import endpoint, application, ResponseCodec
    from postfan.wire.triggers import http

    # agg = O.Aggregator(fetcher)
    # endp = endpoint(agg.using(O.Strategy.GRAPH)).expose(
    #     http.get("/posts/alt"),
    #     ResponseCodec(),
    # )
    # app = application().mount(endp)
"""

from postfan.wire._endpoint import (
    Endpoint,
    endpoint,
)
from postfan.wire._app import Application, application
from postfan.wire._types import (
    Trigger,
    Codec,
    Exposure,
)

# Common codecs and triggers
from postfan.wire.codecs.posts import ResponseCodec, PostResultOut, ErrorOut
from postfan.wire.triggers.http import (
    HTTPRouteTrigger,
    Method,
    Path,
)

# Subpackages
from postfan.wire import codecs, triggers, contrib

__all__ = (
    # Core API
    "Endpoint",
    "endpoint",
    "Application",
    "application",
    "Trigger",
    "Codec",
    "Exposure",
    # Built-ins
    "ResponseCodec",
    "PostResultOut",
    "ErrorOut",
    "HTTPRouteTrigger",
    "Method",
    "Path",
    # Subpackages
    "codecs",
    "triggers",
    "contrib",
)
