from datetime import date

import pytest

from habitvault.services.dates import (
    month_bounds,
    round_percent,
    sub_months,
    week_bounds,
    weekday_index,
    year_bounds,
)
from habitvault.services.timeframes import habit_timeframe, timeframe_from_description


def test_weekday_index_is_sunday_first():
    assert weekday_index(date(2025, 1, 5)) == 0  # Sunday
    assert weekday_index(date(2025, 1, 6)) == 1  # Monday
    assert weekday_index(date(2025, 1, 11)) == 6  # Saturday


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2025, 5, 31), date(2025, 2, 28)),
        (date(2024, 5, 31), date(2024, 2, 29)),
        (date(2025, 2, 15), date(2024, 11, 15)),
    ],
)
def test_sub_months_clamps_day(value, expected):
    assert sub_months(value, 3) == expected


def test_week_bounds_start_monday():
    assert week_bounds(date(2025, 1, 8)) == (date(2025, 1, 6), date(2025, 1, 12))
    assert week_bounds(date(2025, 1, 12)) == (date(2025, 1, 6), date(2025, 1, 12))
    assert week_bounds(date(2025, 1, 6)) == (date(2025, 1, 6), date(2025, 1, 12))


def test_month_and_year_bounds():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert year_bounds(date(2025, 7, 4)) == (date(2025, 1, 1), date(2025, 12, 31))


def test_round_percent():
    assert round_percent(1, 3) == 33
    assert round_percent(1, 2) == 50
    assert round_percent(5, 8) == 63
    assert round_percent(3, 0) == 0


@pytest.mark.parametrize(
    "description, expected",
    [
        (None, "daily"),
        ("Read 20 pages", "daily"),
        ("Weekly review", "weekly"),
        ("Pay bills MONTHLY", "monthly"),
        ("weekly and monthly", "weekly"),
    ],
)
def test_timeframe_from_description(description, expected):
    assert timeframe_from_description(description) == expected


def test_explicit_timeframe_wins_over_description():
    class Stub:
        description = "weekly cleanup"
        timeframe = "monthly"

    assert habit_timeframe(Stub()) == "monthly"
    Stub.timeframe = None
    assert habit_timeframe(Stub()) == "weekly"
