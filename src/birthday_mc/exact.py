import math
from fractions import Fraction
from typing import Dict, Iterable

from .sampler import CALENDAR_SIZE


def exact_probability(n: int, calendar_size: int = CALENDAR_SIZE) -> float:
    """
    Closed-form probability that at least two of n people share a birthday:

        P = 1 - n! * C(calendar_size, n) / calendar_size**n

    n! * C(d, n) is the falling factorial perm(d, n). Both it and d**n are
    exact Python ints, and int / int is correctly rounded, so nothing
    overflows for any n <= calendar_size. Past that the pigeonhole
    principle gives exactly 1.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if calendar_size < 1:
        raise ValueError("calendar_size must be >= 1")

    if n <= 1:
        return 0.0
    if n > calendar_size:
        return 1.0

    return 1.0 - math.perm(calendar_size, n) / calendar_size**n


def approximate_probability(n: int, calendar_size: int = CALENDAR_SIZE) -> float:
    """
    Poisson approximation 1 - exp(-n(n-1) / 2d).
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if calendar_size < 1:
        raise ValueError("calendar_size must be >= 1")

    return 1.0 - math.exp(-n * (n - 1) / (2 * calendar_size))


def exact_probability_table(
    ns: Iterable[int],
    calendar_size: int = CALENDAR_SIZE,
) -> Dict[int, float]:
    return {n: exact_probability(n, calendar_size) for n in ns}


def people_for_probability(target: float, calendar_size: int = CALENDAR_SIZE) -> int:
    """
    Smallest n whose exact probability reaches target (23 for 0.5).

    Compared in exact arithmetic: the float from exact_probability already
    rounds to 1.0 long before the pigeonhole bound, so target=1.0 must
    still answer calendar_size + 1.
    """
    if not 0.0 <= target <= 1.0:
        raise ValueError("target must be in [0, 1]")

    # P >= target  <=>  perm(d, n) <= (1 - target) * d**n
    miss = 1 - Fraction(target)
    for n in range(calendar_size + 1):
        if math.perm(calendar_size, n) <= miss * calendar_size**n:
            return n
    return calendar_size + 1
