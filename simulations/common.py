# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import math
import time

from birthday_mc.sampler import CALENDAR_SIZE


EVENTS = ("a", "b")


@dataclass(frozen=True)
class EstimateSpec:
    """
    Common experiment parameters shared across all simulations.
    """
    event: str  # "a" (shared birthday) or "b" (consecutive-day run)
    people: int
    trials: int
    repeats: int = 1
    run_length: int = 1  # only used by event "b"
    calendar_size: int = CALENDAR_SIZE
    workers: int = 1  # number of processes per estimate

    def __post_init__(self) -> None:
        if self.event not in EVENTS:
            raise ValueError(f"event must be one of {EVENTS}")
        if self.people < 0:
            raise ValueError("people must be >= 0")
        if self.trials < 1:
            raise ValueError("trials must be >= 1")
        if self.repeats < 1:
            raise ValueError("repeats must be >= 1")
        if self.run_length < 1:
            raise ValueError("run_length must be >= 1")
        if self.calendar_size < 1:
            raise ValueError("calendar_size must be >= 1")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")


@dataclass(frozen=True)
class SummaryStats:
    """
    Spread of repeated estimates.
    """
    mean: float
    min: float
    max: float
    std: float  # population stddev


def summarize_estimates(values: List[float]) -> SummaryStats:
    """
    Compute mean/min/max/std over repeated estimates (population stddev).
    Stddev computed via a two-pass method for clarity.
    """
    if not values:
        raise ValueError("values must be non-empty")

    n = len(values)
    mean = math.fsum(values) / n

    var_acc = 0.0
    for v in values:
        d = v - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(mean=mean, min=min(values), max=max(values), std=std)


@dataclass
class ExperimentResult:
    """
    Common return type for all simulations.
    """
    method: str
    spec: EstimateSpec
    estimates: List[float]
    exact: Optional[float] = None

    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.estimates) != self.spec.repeats:
            raise ValueError(
                f"estimate count mismatch: expected {self.spec.repeats}, "
                f"got {len(self.estimates)}"
            )
        for e in self.estimates:
            if not 0.0 <= e <= 1.0:
                raise ValueError(f"estimate out of range: {e}")

        self.stats = summarize_estimates(self.estimates)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    return (
        f"{r.method}: people={r.spec.people}, trials={r.spec.trials}, "
        f"repeats={r.spec.repeats}, mean={s.mean:.4f}, min={s.min:.4f}, "
        f"max={s.max:.4f}, std={s.std:.4f}"
        + (f", exact={r.exact:.4f}" if r.exact is not None else "")
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
