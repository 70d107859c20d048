"""Japanese public holiday calendar."""

from datetime import date

from yasumi.calculator import HolidayCalculator, default_calculator
from yasumi.config import Config
from yasumi.dates import DateLike
from yasumi.errors import ParseError, YasumiError
from yasumi.models import Holiday, HolidayKind


def is_holiday(target_date: DateLike) -> bool:
    """Check if a date is a Japanese public holiday."""
    return default_calculator().is_holiday(target_date)


def holiday_name(target_date: DateLike) -> str | None:
    """Get the name of a Japanese holiday, or None if not a holiday."""
    return default_calculator().holiday_name(target_date)


is_holiday_name = holiday_name


def is_no_workday(target_date: DateLike) -> bool:
    """Check if a date is a Saturday, a Sunday or a public holiday."""
    return default_calculator().is_no_workday(target_date)


def month_holidays(year: int, month: int) -> list[tuple[date, str]]:
    """(date, name) pairs of a month's holidays, sorted by date."""
    calculator = default_calculator()
    return [
        holiday.as_tuple(calculator.language) for holiday in calculator.resolve_month(year, month)
    ]


def year_holidays(year: int) -> list[tuple[date, str]]:
    """(date, name) pairs of a year's holidays, sorted by date."""
    calculator = default_calculator()
    return [holiday.as_tuple(calculator.language) for holiday in calculator.resolve_year(year)]


def holidays_between(start: DateLike, end: DateLike) -> list[tuple[date, str]]:
    """(date, name) pairs of holidays from `start` to `end`, both inclusive."""
    calculator = default_calculator()
    return [
        holiday.as_tuple(calculator.language)
        for holiday in calculator.holidays_between(start, end)
    ]


holidays = holidays_between
between = holidays_between

__all__ = [
    "Config",
    "Holiday",
    "HolidayCalculator",
    "HolidayKind",
    "ParseError",
    "YasumiError",
    "between",
    "holiday_name",
    "holidays",
    "holidays_between",
    "is_holiday",
    "is_holiday_name",
    "is_no_workday",
    "month_holidays",
    "year_holidays",
]
