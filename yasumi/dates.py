"""Date coercion and weekday helpers."""

from calendar import monthrange
from datetime import date, datetime, timedelta

from yasumi.errors import ParseError

DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")

# date.weekday(): 0 = Monday ... 5 = Saturday, 6 = Sunday
SATURDAY = 5
SUNDAY = 6

DateLike = date | datetime | str


def to_date(value: DateLike) -> date:
    """
    Coerce a date-like value into a date.

    Accepts a date, a datetime (its calendar date is kept) or text in
    YYYY-MM-DD or YYYY/MM/DD form.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        msg = f"Invalid date {value!r}, expected YYYY-MM-DD or YYYY/MM/DD"
        raise ParseError(msg)
    msg = f"Cannot read {type(value).__name__} as a date"
    raise ParseError(msg)


def is_weekend(target_date: date) -> bool:
    """Check if a date is a Saturday or Sunday."""
    return target_date.weekday() in (SATURDAY, SUNDAY)


def nth_weekday(year: int, month: int, weekday: int, ordinal: int) -> date | None:
    """
    Date of the ordinal-th given weekday of a month.

    `weekday` follows date.weekday() and `ordinal` counts from 1.
    Returns None when the month has no such day.
    """
    if not 1 <= ordinal <= 5:
        return None
    first = date(year, month, 1)
    first_match = first + timedelta(days=(weekday - first.weekday()) % 7)
    day = first_match.day + (ordinal - 1) * 7
    if day > monthrange(year, month)[1]:
        return None
    return date(year, month, day)
