import random
from typing import List, Optional

CALENDAR_SIZE = 365


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Return a private random stream. Every sampling call takes one of these
    explicitly; the module-level `random` generator is never touched.
    """
    return random.Random(seed)


def sample_birthdays(
    n: int,
    rng: Optional[random.Random] = None,
    calendar_size: int = CALENDAR_SIZE,
) -> List[int]:
    """
    Draw n birthdays independently and uniformly from [1, calendar_size].

    Draws are with replacement and returned in draw order, so the result is
    neither sorted nor free of duplicates.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if calendar_size < 1:
        raise ValueError("calendar_size must be >= 1")

    if rng is None:
        rng = make_rng()

    return [rng.randrange(calendar_size) + 1 for _ in range(n)]
