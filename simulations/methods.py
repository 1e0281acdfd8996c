# simulations/methods.py

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List

from .common import EstimateSpec, ExperimentResult, Timer
from .parallel import parallel_estimate

from birthday_mc.estimators import estimate_a, estimate_b, repeat
from birthday_mc.exact import exact_probability

logger = logging.getLogger(__name__)

SimFn = Callable[[EstimateSpec, int], ExperimentResult]


def repeat_worker_seeds(seed: int, repeats: int, workers: int) -> List[List[int]]:
    """
    One seed per (repeat, worker), drawn without replacement from a router
    stream so no two workers anywhere in the experiment share a stream.
    """
    router_rng = random.Random(seed)
    flat = router_rng.sample(range(2**31), repeats * workers)
    return [flat[r * workers:(r + 1) * workers] for r in range(repeats)]


def _repeat_parallel(spec: EstimateSpec, seed: int) -> List[float]:
    """
    Multi-process repeats, each worker of each repeat on its own stream.
    """
    per_repeat = iter(repeat_worker_seeds(seed, spec.repeats, spec.workers))

    def one() -> float:
        return parallel_estimate(
            spec.event,
            spec.people,
            spec.trials,
            spec.workers,
            seed=seed,
            run_length=spec.run_length,
            calendar_size=spec.calendar_size,
            seeds=next(per_repeat),
        )

    return repeat(one, spec.repeats)


def simulate_shared_birthday(spec: EstimateSpec, seed: int) -> ExperimentResult:
    """
    Event A: at least two of spec.people share a birthday.

    All repeats draw from one seeded stream, so they are independent of each
    other but reproducible as a whole. The exact answer rides along for
    comparison.
    """
    with Timer() as t:
        if spec.workers > 1:
            estimates = _repeat_parallel(spec, seed)
        else:
            rng = random.Random(seed)
            estimates = repeat(
                lambda: estimate_a(spec.people, spec.trials, rng, spec.calendar_size),
                spec.repeats,
            )

    logger.info("shared_birthday: %d repeats in %.3fs", spec.repeats, t.elapsed_s)
    return ExperimentResult(
        method="shared_birthday",
        spec=spec,
        estimates=estimates,
        exact=exact_probability(spec.people, spec.calendar_size),
        runtime_s=t.elapsed_s,
        meta={"workers": spec.workers},
    )


def simulate_consecutive_run(spec: EstimateSpec, seed: int) -> ExperimentResult:
    """
    Event B: spec.run_length consecutive one-day gaps among the distinct
    birthdays. There is no closed form here, so `exact` stays None.
    """
    with Timer() as t:
        if spec.workers > 1:
            estimates = _repeat_parallel(spec, seed)
        else:
            rng = random.Random(seed)
            estimates = repeat(
                lambda: estimate_b(
                    spec.people, spec.run_length, spec.trials, rng, spec.calendar_size
                ),
                spec.repeats,
            )

    logger.info("consecutive_run: %d repeats in %.3fs", spec.repeats, t.elapsed_s)
    return ExperimentResult(
        method="consecutive_run",
        spec=spec,
        estimates=estimates,
        runtime_s=t.elapsed_s,
        meta={"run_length": spec.run_length, "workers": spec.workers},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SimFn:
    name = name.strip().lower()
    if name not in METHODS:
        raise ValueError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps event name -> function.
METHODS: Dict[str, SimFn] = {
    "a": simulate_shared_birthday,
    "b": simulate_consecutive_run,
}
