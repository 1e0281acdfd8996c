"""
birthday_mc: Monte Carlo estimators for the birthday problem.

Exact answers come from birthday_mc.exact; simulated ones from
birthday_mc.estimators, which draw birthdays via birthday_mc.sampler.
"""

from .exact import (
    approximate_probability,
    exact_probability,
    exact_probability_table,
    people_for_probability,
)
from .events import day_gaps, has_consecutive_run, has_shared_birthday
from .estimators import count_hits, estimate_a, estimate_b, repeat
from .sampler import CALENDAR_SIZE, make_rng, sample_birthdays

__all__ = [
    "CALENDAR_SIZE",
    "approximate_probability",
    "count_hits",
    "day_gaps",
    "estimate_a",
    "estimate_b",
    "exact_probability",
    "exact_probability_table",
    "has_consecutive_run",
    "has_shared_birthday",
    "make_rng",
    "people_for_probability",
    "repeat",
    "sample_birthdays",
]
