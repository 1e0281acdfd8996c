"""
Monte Carlo estimators for the birthday events.

An estimate is hits / trials over independent trials, each drawing a fresh
birthday sample from the caller's random stream. Passing the same seeded
stream reproduces the estimate exactly.
"""

import logging
import random
from typing import Callable, List, Optional, Sequence

from .events import has_consecutive_run, has_shared_birthday
from .sampler import CALENDAR_SIZE, make_rng, sample_birthdays

logger = logging.getLogger(__name__)

Predicate = Callable[[Sequence[int]], bool]


def _check_trials(n: int, trials: int) -> None:
    if n < 0:
        raise ValueError("n must be >= 0")
    if trials < 1:
        raise ValueError("trials must be >= 1")


def count_hits(
    predicate: Predicate,
    n: int,
    trials: int,
    rng: random.Random,
    calendar_size: int = CALENDAR_SIZE,
) -> int:
    """
    Run `trials` independent trials and count those where predicate holds.
    """
    _check_trials(n, trials)

    hits = 0
    for _ in range(trials):
        if predicate(sample_birthdays(n, rng, calendar_size)):
            hits += 1
    return hits


def estimate_a(
    n: int,
    trials: int,
    rng: Optional[random.Random] = None,
    calendar_size: int = CALENDAR_SIZE,
) -> float:
    """
    Estimated probability that at least two of n people share a birthday.
    """
    if rng is None:
        rng = make_rng()

    hits = count_hits(has_shared_birthday, n, trials, rng, calendar_size)
    logger.debug("estimate_a n=%d trials=%d hits=%d", n, trials, hits)
    return hits / trials


def estimate_b(
    n: int,
    run_length: int,
    trials: int,
    rng: Optional[random.Random] = None,
    calendar_size: int = CALENDAR_SIZE,
) -> float:
    """
    Estimated probability that the distinct birthdays of n people contain
    run_length consecutive one-day gaps (see events.has_consecutive_run).
    """
    if run_length < 1:
        raise ValueError("run_length must be >= 1")
    if rng is None:
        rng = make_rng()

    def predicate(birthdays: Sequence[int]) -> bool:
        return has_consecutive_run(birthdays, run_length)

    hits = count_hits(predicate, n, trials, rng, calendar_size)
    logger.debug(
        "estimate_b n=%d run_length=%d trials=%d hits=%d",
        n, run_length, trials, hits,
    )
    return hits / trials


def repeat(estimator_call: Callable[[], float], repeats: int) -> List[float]:
    """
    Call estimator_call `repeats` times and return the estimates in call
    order. Independence comes from the stream the call draws from, e.g.

        rng = make_rng(7)
        repeat(lambda: estimate_a(23, 10000, rng), 10)

    Summaries (mean, spread) are left to the caller.
    """
    if repeats < 1:
        raise ValueError("repeats must be >= 1")

    return [estimator_call() for _ in range(repeats)]
