"""Holiday rules of the Act on National Holidays (Act No. 178 of 1948)."""

from calendar import MONDAY
from dataclasses import dataclass
from datetime import date

from yasumi.dates import nth_weekday
from yasumi.equinox import autumnal_equinox_day, vernal_equinox_day


@dataclass(frozen=True)
class FixedDate:
    """Holiday on the same month and day every year."""

    month: int
    day: int
    name: str
    name_en: str
    since: int
    until: int | None = None


@dataclass(frozen=True)
class NthWeekday:
    """Holiday on the ordinal-th weekday of a month ("Happy Monday")."""

    month: int
    weekday: int
    ordinal: int
    name: str
    name_en: str
    since: int
    until: int | None = None


@dataclass(frozen=True)
class VernalEquinox:
    """Holiday on the March equinox."""

    name: str
    name_en: str
    since: int
    until: int | None = None


@dataclass(frozen=True)
class AutumnalEquinox:
    """Holiday on the September equinox."""

    name: str
    name_en: str
    since: int
    until: int | None = None


HolidayRule = FixedDate | NthWeekday | VernalEquinox | AutumnalEquinox


def in_force(rule: HolidayRule, year: int) -> bool:
    """Check if a rule is part of the law in the given year."""
    if year < rule.since:
        return False
    return rule.until is None or year <= rule.until


def rule_date(rule: HolidayRule, year: int) -> date | None:
    """Resolve a rule to its date in `year`, or None if it does not apply."""
    if not in_force(rule, year):
        return None

    match rule:
        case FixedDate(month=month, day=day):
            return date(year, month, day)
        case NthWeekday(month=month, weekday=weekday, ordinal=ordinal):
            return nth_weekday(year, month, weekday, ordinal)
        case VernalEquinox():
            day = vernal_equinox_day(year)
            return date(year, 3, day) if day else None
        case AutumnalEquinox():
            day = autumnal_equinox_day(year)
            return date(year, 9, day) if day else None
    msg = f"Unknown holiday rule: {rule!r}"
    raise TypeError(msg)


def one_off(on: date, name: str, name_en: str) -> FixedDate:
    """Rule for a holiday observed in a single year only."""
    return FixedDate(on.month, on.day, name, name_en, since=on.year, until=on.year)


NEW_YEARS_DAY = ("元日", "New Year's Day")
COMING_OF_AGE_DAY = ("成人の日", "Coming of Age Day")
NATIONAL_FOUNDATION_DAY = ("建国記念の日", "National Foundation Day")
EMPERORS_BIRTHDAY = ("天皇誕生日", "The Emperor's Birthday")
VERNAL_EQUINOX_DAY = ("春分の日", "Vernal Equinox Day")
GREENERY_DAY = ("みどりの日", "Greenery Day")
SHOWA_DAY = ("昭和の日", "Showa Day")
CONSTITUTION_MEMORIAL_DAY = ("憲法記念日", "Constitution Memorial Day")
CHILDRENS_DAY = ("こどもの日", "Children's Day")
MARINE_DAY = ("海の日", "Marine Day")
MOUNTAIN_DAY = ("山の日", "Mountain Day")
RESPECT_FOR_THE_AGED_DAY = ("敬老の日", "Respect for the Aged Day")
AUTUMNAL_EQUINOX_DAY = ("秋分の日", "Autumnal Equinox Day")
HEALTH_AND_SPORTS_DAY = ("体育の日", "Health and Sports Day")
SPORTS_DAY = ("スポーツの日", "Sports Day")
CULTURE_DAY = ("文化の日", "Culture Day")
LABOR_THANKSGIVING_DAY = ("勤労感謝の日", "Labor Thanksgiving Day")
CROWN_PRINCE_AKIHITO_WEDDING = (
    "皇太子・明仁親王の結婚の儀",
    "Wedding Ceremony of Crown Prince Akihito",
)
EMPEROR_SHOWA_FUNERAL = ("昭和天皇の大喪の礼", "Funeral Ceremony of Emperor Showa")
ENTHRONEMENT_CEREMONY_1990 = (
    "即位の礼正殿の儀",
    "Ceremony of the Enthronement of the Emperor",
)
CROWN_PRINCE_NARUHITO_WEDDING = (
    "皇太子・皇太子徳仁親王の結婚の儀",
    "Wedding Ceremony of Crown Prince Naruhito",
)
ENTHRONEMENT_DAY = ("天皇の即位の日", "Day of the Emperor's Enthronement")
ENTHRONEMENT_CEREMONY_2019 = ("即位礼正殿の儀", "Enthronement Ceremony")

# Ordered roughly by calendar position; the calculator sorts the results.
HOLIDAY_RULES: tuple[HolidayRule, ...] = (
    FixedDate(1, 1, *NEW_YEARS_DAY, since=1948),
    FixedDate(1, 15, *COMING_OF_AGE_DAY, since=1948, until=1999),
    NthWeekday(1, MONDAY, 2, *COMING_OF_AGE_DAY, since=2000),
    FixedDate(2, 11, *NATIONAL_FOUNDATION_DAY, since=1967),
    FixedDate(4, 29, *EMPERORS_BIRTHDAY, since=1948, until=1988),
    FixedDate(12, 23, *EMPERORS_BIRTHDAY, since=1989, until=2018),
    FixedDate(2, 23, *EMPERORS_BIRTHDAY, since=2020),
    VernalEquinox(*VERNAL_EQUINOX_DAY, since=1949),
    FixedDate(4, 29, *GREENERY_DAY, since=1989, until=2006),
    FixedDate(5, 4, *GREENERY_DAY, since=2007),
    FixedDate(4, 29, *SHOWA_DAY, since=2007),
    FixedDate(5, 3, *CONSTITUTION_MEMORIAL_DAY, since=1948),
    FixedDate(5, 5, *CHILDRENS_DAY, since=1948),
    FixedDate(7, 20, *MARINE_DAY, since=1996, until=2002),
    NthWeekday(7, MONDAY, 3, *MARINE_DAY, since=2003, until=2019),
    NthWeekday(7, MONDAY, 3, *MARINE_DAY, since=2022),
    FixedDate(8, 11, *MOUNTAIN_DAY, since=2016, until=2019),
    FixedDate(8, 11, *MOUNTAIN_DAY, since=2022),
    FixedDate(9, 15, *RESPECT_FOR_THE_AGED_DAY, since=1966, until=2002),
    NthWeekday(9, MONDAY, 3, *RESPECT_FOR_THE_AGED_DAY, since=2003),
    AutumnalEquinox(*AUTUMNAL_EQUINOX_DAY, since=1948),
    FixedDate(10, 10, *HEALTH_AND_SPORTS_DAY, since=1966, until=1999),
    NthWeekday(10, MONDAY, 2, *HEALTH_AND_SPORTS_DAY, since=2000, until=2019),
    NthWeekday(10, MONDAY, 2, *SPORTS_DAY, since=2022),
    FixedDate(11, 3, *CULTURE_DAY, since=1948),
    FixedDate(11, 23, *LABOR_THANKSGIVING_DAY, since=1948),
    # Tokyo 2020 Olympic and Paralympic Games special measures
    one_off(date(2020, 7, 23), *MARINE_DAY),
    one_off(date(2020, 7, 24), *SPORTS_DAY),
    one_off(date(2020, 8, 10), *MOUNTAIN_DAY),
    one_off(date(2021, 7, 22), *MARINE_DAY),
    one_off(date(2021, 7, 23), *SPORTS_DAY),
    one_off(date(2021, 8, 8), *MOUNTAIN_DAY),
    # Imperial events
    one_off(date(1959, 4, 10), *CROWN_PRINCE_AKIHITO_WEDDING),
    one_off(date(1989, 2, 24), *EMPEROR_SHOWA_FUNERAL),
    one_off(date(1990, 11, 12), *ENTHRONEMENT_CEREMONY_1990),
    one_off(date(1993, 6, 9), *CROWN_PRINCE_NARUHITO_WEDDING),
    one_off(date(2019, 5, 1), *ENTHRONEMENT_DAY),
    one_off(date(2019, 10, 22), *ENTHRONEMENT_CEREMONY_2019),
)
