from typing import Self
from postfan.wire._endpoint import Endpoint


class Application:
    def __init__(self, title: str = "postfan") -> None:
        self.title = title
        self.endpoints: list[Endpoint] = []

    def mount(self, *endps: Endpoint) -> Self:
        self.endpoints.extend(endps)
        return self

    def paths(self) -> list[str]:
        return [trigger.path for endp in self.endpoints for trigger, _ in endp.exposures]


def application(title: str = "postfan") -> Application:
    return Application(title)
