from __future__ import annotations

from dataclasses import dataclass, field

from postfan.orchestrate import Aggregator
from postfan.wire._types import Codec, Exposure, Trigger


@dataclass(slots=True)
class Endpoint:
    aggregator: Aggregator
    exposures: list[Exposure] = field(default_factory=list[Exposure])

    @classmethod
    def from_aggregator(cls, aggregator: Aggregator) -> Endpoint:
        return cls(aggregator=aggregator)

    def expose(self, trigger: Trigger, codec: Codec) -> Endpoint:
        return Endpoint(
            aggregator=self.aggregator, exposures=[*self.exposures, (trigger, codec)]
        )


def endpoint(aggregator: Aggregator) -> Endpoint:
    return Endpoint.from_aggregator(aggregator)
