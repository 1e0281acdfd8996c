# simulations/run.py

from __future__ import annotations

import random
from typing import Iterable, List, Tuple

from .common import EstimateSpec, ExperimentResult
from .methods import get_method

from birthday_mc.estimators import estimate_a
from birthday_mc.exact import exact_probability_table
from birthday_mc.sampler import CALENDAR_SIZE

DEFAULT_SEED = 42


def run_experiment(
    event: str,
    people: int,
    trials: int,
    repeats: int = 1,
    run_length: int = 1,
    calendar_size: int = CALENDAR_SIZE,
    seed: int = DEFAULT_SEED,
    workers: int = 1,
) -> ExperimentResult:
    """
    Run a single simulation and return an ExperimentResult.

    Parameters
    ----------
    event:
        'a' (shared birthday) or 'b' (consecutive-day run).
    people:
        Number of birthdays drawn per trial.
    trials:
        Trials per estimate.
    repeats:
        Independent estimates to produce.
    run_length:
        Required number of consecutive one-day gaps (event 'b' only).
    calendar_size:
        Number of days in the calendar.
    seed:
        Base RNG seed.
    workers:
        Processes per estimate; 1 runs in-process.

    Returns
    -------
    ExperimentResult
    """
    spec = EstimateSpec(
        event=event.strip().lower(),
        people=people,
        trials=trials,
        repeats=repeats,
        run_length=run_length,
        calendar_size=calendar_size,
        workers=workers,
    )
    fn = get_method(spec.event)
    return fn(spec, seed)


def sweep_people(
    ns: Iterable[int],
    trials: int,
    seed: int = DEFAULT_SEED,
    calendar_size: int = CALENDAR_SIZE,
) -> List[Tuple[int, float, float]]:
    """
    Exact vs simulated shared-birthday probability for each n, as
    (n, exact, estimate) rows. One seeded stream serves the whole sweep.
    """
    ns = list(ns)
    exact = exact_probability_table(ns, calendar_size)

    rng = random.Random(seed)
    rows = []
    for n in ns:
        rows.append((n, exact[n], estimate_a(n, trials, rng, calendar_size)))
    return rows
