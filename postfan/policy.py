"""
Aggregation policies.

    from postfan import policy as P

    pol = P.policy(P.timeout(5.0), P.parallel_max(4))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

MIN_WORKERS = 3
"""Three fetches must be able to run at once."""

# ═══════════════════════════════════════════════════════════════════════════════
# Policies
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class TimeoutPolicy:
    """Upper bound for a single upstream fetch."""
    duration: timedelta

    def __post_init__(self) -> None:
        if self.duration <= timedelta(0):
            raise ValueError(f"timeout must be positive, got {self.duration}")

    @property
    def seconds(self) -> float:
        return self.duration.total_seconds()

def timeout(seconds: float) -> TimeoutPolicy:
    return TimeoutPolicy(timedelta(seconds=seconds))


@dataclass(frozen=True, slots=True)
class ParallelMaxPolicy:
    """Size of the fetch worker pool."""
    max_concurrent: int

    def __post_init__(self) -> None:
        if self.max_concurrent < MIN_WORKERS:
            raise ValueError(
                f"pool of {self.max_concurrent} cannot hold {MIN_WORKERS} concurrent fetches"
            )

def parallel_max(n: int) -> ParallelMaxPolicy:
    return ParallelMaxPolicy(n)


@dataclass(frozen=True, slots=True)
class Policy:
    timeout: TimeoutPolicy = field(default_factory=lambda: timeout(10.0))
    parallel: ParallelMaxPolicy = field(default_factory=lambda: parallel_max(MIN_WORKERS))

def policy(*parts: TimeoutPolicy | ParallelMaxPolicy) -> Policy:
    """Combine policy parts; later parts override earlier ones."""
    result = Policy()
    for part in parts:
        match part:
            case TimeoutPolicy():
                result = Policy(timeout=part, parallel=result.parallel)
            case ParallelMaxPolicy():
                result = Policy(timeout=result.timeout, parallel=part)
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "MIN_WORKERS",
    "TimeoutPolicy",
    "timeout",
    "ParallelMaxPolicy",
    "parallel_max",
    "Policy",
    "policy",
)
