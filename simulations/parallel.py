# simulations/parallel.py

from __future__ import annotations

import logging
from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple

from .common import EVENTS

from birthday_mc.estimators import count_hits
from birthday_mc.events import has_consecutive_run, has_shared_birthday
from birthday_mc.sampler import CALENDAR_SIZE, make_rng

logger = logging.getLogger(__name__)

# (event, people, trials, run_length, calendar_size, seed)
Task = Tuple[str, int, int, int, int, int]


def worker_seeds(seed: int, workers: int) -> List[int]:
    """
    One seed per worker, spaced like the per-scheduler streams elsewhere in
    the harness so no two workers share a stream.
    """
    return [seed + 1000 * (i + 1) for i in range(workers)]


def split_trials(trials: int, workers: int) -> List[int]:
    """
    Spread trials as evenly as possible; the last worker takes the remainder.
    """
    per_worker = trials // workers
    remainder = trials % workers
    chunks = [per_worker] * workers
    chunks[-1] += remainder
    return chunks


def _hits_worker(task: Task) -> int:
    event, people, trials, run_length, calendar_size, seed = task
    if trials == 0:
        return 0

    rng = make_rng(seed)
    if event == "a":
        return count_hits(has_shared_birthday, people, trials, rng, calendar_size)

    def predicate(birthdays):
        return has_consecutive_run(birthdays, run_length)

    return count_hits(predicate, people, trials, rng, calendar_size)


def parallel_estimate(
    event: str,
    people: int,
    trials: int,
    workers: int,
    seed: int,
    run_length: int = 1,
    calendar_size: int = CALENDAR_SIZE,
    seeds: Optional[Sequence[int]] = None,
) -> float:
    """
    Estimate event "a" or "b" with trials split across a process pool.

    Each worker draws from its own seeded stream, so the result depends only
    on (seed, workers) and not on scheduling. `seeds`, one per worker,
    replaces the streams derived from `seed`.
    """
    if event not in EVENTS:
        raise ValueError(f"unknown event '{event}'")
    if people < 0:
        raise ValueError("people must be >= 0")
    if trials < 1:
        raise ValueError("trials must be >= 1")
    if workers < 1:
        raise ValueError("workers must be >= 1")
    if run_length < 1:
        raise ValueError("run_length must be >= 1")
    if seeds is None:
        seeds = worker_seeds(seed, workers)
    elif len(seeds) != workers:
        raise ValueError("need exactly one seed per worker")

    tasks: List[Task] = [
        (event, people, chunk, run_length, calendar_size, s)
        for chunk, s in zip(split_trials(trials, workers), seeds)
    ]

    if workers == 1:
        results = [_hits_worker(tasks[0])]
    else:
        with Pool(processes=workers) as pool:
            results = pool.map(_hits_worker, tasks)

    logger.debug("parallel_estimate event=%s hits per worker=%s", event, results)
    return sum(results) / trials
