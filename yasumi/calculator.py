"""Holiday resolution engine."""

import logging
from datetime import date, timedelta
from functools import lru_cache
from operator import attrgetter

from yasumi.config import Config
from yasumi.dates import SUNDAY, DateLike, is_weekend, to_date
from yasumi.errors import HolidayCollisionError
from yasumi.models import Holiday, HolidayKind
from yasumi.rules import HOLIDAY_RULES, HolidayRule, rule_date

logger = logging.getLogger(__name__)

# Constants
MIN_YEAR = 1948
MAX_YEAR = 2150
LAW_ENACTED = date(1948, 7, 20)  # Act on National Holidays comes into force
SUBSTITUTE_ENACTED = date(1973, 4, 12)  # substitute holidays introduced
SUBSTITUTE_SUFFIX = "振替休日"
SUBSTITUTE_SUFFIX_EN = "(substitute holiday)"
CITIZENS_HOLIDAY = ("国民の休日", "Citizens' Holiday")

ONE_DAY = timedelta(days=1)


def resolve_national_holidays(
    year: int, rules: tuple[HolidayRule, ...] = HOLIDAY_RULES
) -> list[Holiday]:
    """Evaluate every rule against `year`, sorted by date."""
    holidays = []
    for rule in rules:
        target_date = rule_date(rule, year)
        if target_date is None or target_date < LAW_ENACTED:
            continue
        holidays.append(Holiday(date=target_date, name=rule.name, name_en=rule.name_en))

    holidays.sort(key=attrgetter("date"))
    for previous, current in zip(holidays, holidays[1:]):
        if previous.date == current.date:
            msg = f"{previous.name} and {current.name} both fall on {current.date}"
            raise HolidayCollisionError(msg)
    return holidays


def add_substitute_holidays(holidays: dict[date, Holiday]) -> None:
    """
    Add a substitute holiday for every national holiday on a Sunday.

    The substitute is the first following day that is not already a holiday.
    """
    for holiday in sorted(holidays.values(), key=attrgetter("date")):
        if holiday.kind != HolidayKind.NATIONAL:
            continue
        if holiday.date.weekday() != SUNDAY or holiday.date < SUBSTITUTE_ENACTED:
            continue
        substitute = holiday.date + ONE_DAY
        while substitute in holidays:
            substitute += ONE_DAY
        holidays[substitute] = Holiday(
            date=substitute,
            name=f"{holiday.name} {SUBSTITUTE_SUFFIX}",
            name_en=f"{holiday.name_en} {SUBSTITUTE_SUFFIX_EN}",
            kind=HolidayKind.SUBSTITUTE,
        )


def add_citizens_holidays(holidays: dict[date, Holiday]) -> None:
    """
    Add a citizens' holiday for every non-Sunday sandwiched between two holidays.

    Only national and substitute holidays count as neighbours.
    """
    neighbours = frozenset(holidays)
    for holiday_date in sorted(neighbours):
        candidate = holiday_date + ONE_DAY
        if candidate in neighbours or candidate.weekday() == SUNDAY:
            continue
        if candidate + ONE_DAY in neighbours:
            holidays[candidate] = Holiday(candidate, *CITIZENS_HOLIDAY, kind=HolidayKind.CITIZENS)


@lru_cache(maxsize=256)
def _resolve_year(year: int) -> tuple[Holiday, ...]:
    # Order matters: both passes need the full national set, and the
    # citizens' pass also needs the substitutes.
    holidays = {holiday.date: holiday for holiday in resolve_national_holidays(year)}
    add_substitute_holidays(holidays)
    add_citizens_holidays(holidays)
    ordered = sorted(holidays.values(), key=attrgetter("date"))
    return tuple(holiday for holiday in ordered if holiday.date.year == year)


class HolidayCalculator:
    """Answers holiday queries for the Japanese civil calendar."""

    def __init__(self, language: str = "ja") -> None:
        self.config = Config(language=language)

    @classmethod
    def from_config(cls, config: Config) -> "HolidayCalculator":
        return cls(language=config.language)

    @property
    def language(self) -> str:
        return self.config.language

    def resolve_year(self, year: int) -> list[Holiday]:
        """All holidays of a year, sorted by date. Empty outside MIN_YEAR..MAX_YEAR."""
        if not MIN_YEAR <= year <= MAX_YEAR:
            logger.debug("Year %d is outside %d-%d, no holidays", year, MIN_YEAR, MAX_YEAR)
            return []
        return list(_resolve_year(year))

    def resolve_month(self, year: int, month: int) -> list[Holiday]:
        """Holidays of a single month, sorted by date."""
        return [holiday for holiday in self.resolve_year(year) if holiday.date.month == month]

    def holiday(self, target_date: DateLike) -> Holiday | None:
        """The holiday falling on a date, or None."""
        target_date = to_date(target_date)
        for holiday in self.resolve_month(target_date.year, target_date.month):
            if holiday.date == target_date:
                return holiday
        return None

    def holiday_name(self, target_date: DateLike) -> str | None:
        """Get the name of a holiday, or None if not a holiday."""
        holiday = self.holiday(target_date)
        return holiday.label(self.language) if holiday else None

    def is_holiday(self, target_date: DateLike) -> bool:
        """Check if a date is a Japanese public holiday."""
        return self.holiday(target_date) is not None

    def is_no_workday(self, target_date: DateLike) -> bool:
        """
        Check if a date is a day off.

        A day off is a Saturday, a Sunday or a public holiday.
        """
        target_date = to_date(target_date)
        return is_weekend(target_date) or self.is_holiday(target_date)

    def holidays_between(self, start: DateLike, end: DateLike) -> list[Holiday]:
        """Holidays from `start` to `end`, both inclusive, sorted by date."""
        start = to_date(start)
        end = to_date(end)
        if start > end:
            return []

        holidays = []
        for year in range(start.year, end.year + 1):
            holidays.extend(
                holiday for holiday in self.resolve_year(year) if start <= holiday.date <= end
            )
        return holidays


@lru_cache(maxsize=1)
def default_calculator() -> HolidayCalculator:
    """Calculator configured from the environment or the config file."""
    config = Config.from_env() or Config.load() or Config()
    return HolidayCalculator.from_config(config)
