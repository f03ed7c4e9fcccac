"""Tests for calendar month arithmetic."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from debtwise.errors import InvalidInput
from debtwise.services.dates import add_months, coerce_date, to_iso


@pytest.mark.parametrize(
    ("start", "months", "expected"),
    [
        (date(2024, 1, 15), 0, date(2024, 1, 15)),
        (date(2024, 1, 15), 1, date(2024, 2, 15)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),  # leap year
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 1, 31), 2, date(2024, 3, 31)),
        (date(2024, 11, 30), 3, date(2025, 2, 28)),
        (date(2024, 5, 1), 12, date(2025, 5, 1)),
        (date(2024, 3, 31), -1, date(2024, 2, 29)),
    ],
)
def test_add_months_clamps_to_month_end(start, months, expected):
    assert add_months(start, months) == expected


def test_to_iso():
    assert to_iso(date(2024, 2, 9)) == "2024-02-09"


class TestCoerceDate:
    def test_accepts_dates_and_datetimes(self):
        assert coerce_date(date(2024, 6, 1)) == date(2024, 6, 1)
        assert coerce_date(datetime(2024, 6, 1, 13, 45)) == date(2024, 6, 1)

    def test_accepts_iso_strings(self):
        assert coerce_date("2024-06-01") == date(2024, 6, 1)
        assert coerce_date("2024-06-01T08:00:00Z") == date(2024, 6, 1)

    def test_none_means_today(self):
        assert coerce_date(None, today=date(2030, 1, 2)) == date(2030, 1, 2)

    def test_rejects_garbage(self):
        with pytest.raises(InvalidInput):
            coerce_date("next tuesday")
        with pytest.raises(InvalidInput):
            coerce_date(20240601)
