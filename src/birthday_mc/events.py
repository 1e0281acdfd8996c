"""
Per-trial predicates. Each takes one birthday sample (a sequence of calendar
labels, duplicates allowed) and reports whether the event occurred.
"""

from typing import List, Sequence


def has_shared_birthday(birthdays: Sequence[int]) -> bool:
    """
    Event A: at least two labels coincide. Stops at the first repeat.
    """
    seen = set()
    for day in birthdays:
        if day in seen:
            return True
        seen.add(day)
    return False


def day_gaps(birthdays: Sequence[int]) -> List[int]:
    """
    Gaps between consecutive sorted distinct labels, led by a sentinel 0
    standing in for the first label.

        [9, 3, 4, 4, 6] -> distinct [3, 4, 6, 9] -> [0, 1, 2, 3]
    """
    days = sorted(set(birthdays))
    if not days:
        return []

    gaps = [0]
    for prev, cur in zip(days, days[1:]):
        gaps.append(cur - prev)
    return gaps


def has_consecutive_run(birthdays: Sequence[int], run_length: int) -> bool:
    """
    Event B: run_length consecutive gaps in day_gaps() are all 1.

    Coinciding birthdays collapse to one day before gaps are taken. The
    sentinel gap is 0, so a single isolated day never counts, even for
    run_length == 1; two distinct days exactly one apart do. A window longer
    than the available gaps is simply False. The calendar does not wrap.
    """
    if run_length < 1:
        raise ValueError("run_length must be >= 1")

    streak = 0
    for gap in day_gaps(birthdays):
        if gap == 1:
            streak += 1
            if streak >= run_length:
                return True
        else:
            streak = 0
    return False
