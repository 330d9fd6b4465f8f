"""
Triggers: describe how endpoints are exposed (e.g., HTTP routes).

    from postfan.wire.triggers.http import HTTPRouteTrigger

    http = HTTPRouteTrigger("GET", "/posts")
"""

from postfan.wire.triggers import http


__all__ = ("http",)
