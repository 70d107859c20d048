"""Cross-check resolved holidays against jpholiday."""

import jpholiday
import pytest

from yasumi.calculator import HolidayCalculator
from yasumi.models import HolidayKind


@pytest.mark.parametrize("year", range(2007, 2027))
def test_dates_match_jpholiday(year):
    """The same dates are holidays in both libraries."""
    expected = sorted(holiday_date for holiday_date, _ in jpholiday.year_holidays(year))
    resolved = [holiday.date for holiday in HolidayCalculator().resolve_year(year)]
    assert resolved == expected


def test_national_names_match_jpholiday():
    """Statutory holidays carry the same Japanese names."""
    expected = dict(jpholiday.year_holidays(2024))
    for holiday in HolidayCalculator().resolve_year(2024):
        if holiday.kind == HolidayKind.NATIONAL:
            assert holiday.name == expected[holiday.date]
