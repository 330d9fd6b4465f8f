"""
Graph strategy: the join as a pre-compiled nodnod graph.

Compile once at import, run once per aggregation with fresh injections.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

from nodnod import Scope, Value, EventLoopAgent, Node

from postfan._types import Outcome
from postfan.config import Sources
from postfan.domain import PostResult
from postfan.fetch import Fetcher
from postfan.lift import from_awaitable
from postfan.orchestrate._nodes import JoinNode
from postfan.policy import Policy


# ═══════════════════════════════════════════════════════════════════════════════
# TypedScope
# ═══════════════════════════════════════════════════════════════════════════════

class TypedScope:
    """Type-safe wrapper around nodnod.Scope."""

    __slots__ = ("_scope",)

    def __init__(self, detail: str = "scope") -> None:
        self._scope = Scope(detail=detail)

    @property
    def inner(self) -> Scope:
        return self._scope

    def inject[T](self, typ: type[T], value: T) -> TypedScope:
        self._scope.push(Value(typ, value))
        return self

    def get[T](self, typ: type[T]) -> T:
        result = self._scope.get(typ)
        if result is None:
            raise KeyError(f"{typ.__name__} not found in scope")
        return cast(T, result.value)

    async def __aenter__(self) -> TypedScope:
        await self._scope.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._scope.__aexit__(*args)


# ═══════════════════════════════════════════════════════════════════════════════
# CompiledJoin
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(slots=True, frozen=True)
class CompiledJoin:
    """
    Pre-compiled fetch-and-join graph.

    Example:
        results = await JOIN(sources, fetcher, policy)
    """

    _agent: EventLoopAgent

    async def __call__(
        self,
        sources: Sources,
        fetcher: Fetcher,
        policy: Policy,
    ) -> list[PostResult]:
        async with TypedScope(detail="postfan:graph") as scope:
            (
                scope
                .inject(Sources, sources)
                .inject(Fetcher, fetcher)
                .inject(Policy, policy)
            )
            # Raises the first error any node raised; pending nodes are cancelled.
            await self._agent.run(scope.inner, {})
            return scope.get(JoinNode).data


def compile_join() -> CompiledJoin:
    all_nodes: set[type[Node[Any, Any]]] = {cast(type[Node[Any, Any]], JoinNode)}
    return CompiledJoin(_agent=EventLoopAgent.build(all_nodes))


JOIN = compile_join()


async def run_graph(fetcher: Fetcher, sources: Sources, policy: Policy) -> Outcome:
    return await from_awaitable(lambda: JOIN(sources, fetcher, policy))


__all__ = ("TypedScope", "CompiledJoin", "compile_join", "JOIN", "run_graph")
