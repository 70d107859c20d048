"""
Equinox day approximation.

Japan fixes Vernal and Autumnal Equinox Day by cabinet proclamation each
February, following the National Astronomical Observatory's ephemeris.
For dates ahead of proclamation the widely published linear approximation
is used:

    day = floor(C + 0.242194 * (year - 1980) - floor((year - 1980) / 4))

where C depends on the season and the year band below. The formula agrees
with the proclaimed dates for 1900-2099; outside that band its accuracy
drops and it is not defined at all before 1851 or after 2150.

Reference: http://mt-soft.sakura.ne.jp/kyozai/excel_high/200_jissen_kiso/60_syunbun.htm
"""

import logging
import math

logger = logging.getLogger(__name__)

TROPICAL_YEAR_DRIFT = 0.242194
BASE_YEAR = 1980

# (first year, last year, vernal constant, autumnal constant)
EQUINOX_CONSTANTS = (
    (1851, 1899, 19.8277, 22.2588),
    (1900, 1979, 20.8357, 23.2588),
    (1980, 2099, 20.8431, 23.2488),
    (2100, 2150, 21.8510, 24.2488),
)


def _equinox_day(year: int, autumnal: bool) -> int | None:
    for first, last, vernal_c, autumnal_c in EQUINOX_CONSTANTS:
        if first <= year <= last:
            constant = autumnal_c if autumnal else vernal_c
            break
    else:
        logger.debug("No equinox constant for %d", year)
        return None

    offset = year - BASE_YEAR
    return math.floor(constant + TROPICAL_YEAR_DRIFT * offset - math.floor(offset / 4))


def vernal_equinox_day(year: int) -> int | None:
    """Day of March on which the vernal equinox falls, or None if unknown."""
    return _equinox_day(year, autumnal=False)


def autumnal_equinox_day(year: int) -> int | None:
    """Day of September on which the autumnal equinox falls, or None if unknown."""
    return _equinox_day(year, autumnal=True)
