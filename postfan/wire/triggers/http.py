from dataclasses import dataclass
from typing import Literal


# Read-only surface: aggregation never mutates upstream.
type Method = Literal["GET", "HEAD"]
type Path = str


@dataclass(frozen=True, slots=True)
class HTTPRouteTrigger:
    method: Method
    path: Path
    summary: str | None = None


def get(path: Path, summary: str | None = None) -> HTTPRouteTrigger:
    return HTTPRouteTrigger("GET", path, summary)
