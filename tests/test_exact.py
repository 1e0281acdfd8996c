import math

import pytest

from birthday_mc.exact import (
    approximate_probability,
    exact_probability,
    exact_probability_table,
    people_for_probability,
)


@pytest.mark.parametrize("n", [0, 1])
def test_no_pair_possible(n):
    assert exact_probability(n) == 0.0


@pytest.mark.parametrize("n", [366, 367, 400, 1000])
def test_pigeonhole(n):
    assert exact_probability(n) == 1.0


def test_twenty_three_people():
    assert exact_probability(23) == pytest.approx(0.507, abs=1e-3)


def test_matches_product_form():
    for n in range(0, 80):
        no_match = 1.0
        for i in range(n):
            no_match *= (365 - i) / 365
        assert exact_probability(n) == pytest.approx(1 - no_match, abs=1e-12)


def test_full_calendar_is_finite():
    p = exact_probability(365)
    assert math.isfinite(p)
    assert 0.0 < p <= 1.0


def test_non_decreasing():
    values = [exact_probability(n) for n in range(0, 370)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_small_calendar():
    # two people, two days: they match half the time
    assert exact_probability(2, calendar_size=2) == pytest.approx(0.5)
    assert exact_probability(3, calendar_size=2) == 1.0


def test_rejects_negative_people():
    with pytest.raises(ValueError):
        exact_probability(-1)


def test_rejects_empty_calendar():
    with pytest.raises(ValueError):
        exact_probability(2, calendar_size=0)


def test_approximation_is_close():
    assert approximate_probability(23) == pytest.approx(exact_probability(23), abs=0.01)
    assert approximate_probability(0) == 0.0


def test_table():
    table = exact_probability_table([1, 23, 400])
    assert list(table) == [1, 23, 400]
    assert table[1] == 0.0
    assert table[400] == 1.0


def test_people_for_probability():
    assert people_for_probability(0.5) == 23
    assert people_for_probability(0.0) == 0
    assert people_for_probability(1.0) == 366


@pytest.mark.parametrize("target", [-0.1, 1.5])
def test_people_for_probability_rejects_bad_target(target):
    with pytest.raises(ValueError):
        people_for_probability(target)


def test_people_for_probability_certainty_uses_exact_arithmetic():
    # the float answer already rounds to 1.0 well before 366 people
    assert exact_probability(200) == 1.0
    assert people_for_probability(1.0) == 366
    assert people_for_probability(1.0, calendar_size=2) == 3


def test_people_for_probability_matches_float_below_rounding():
    for target in (0.1, 0.25, 0.9, 0.99):
        n = people_for_probability(target)
        assert exact_probability(n) >= target
        assert exact_probability(n - 1) < target
