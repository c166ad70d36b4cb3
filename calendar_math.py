# calendar_math.py
# Pure Jalali calendar arithmetic. No state, integers only.
#
# Absolute days are proleptic Gregorian ordinals (datetime.date.toordinal(),
# 0001-01-01 == 1), so host dates convert without any extra arithmetic.
import datetime
from functools import lru_cache
from typing import Tuple

from errors import InvalidDate, OutOfSupportedRange

# Years where the intercalation cycle shifts (Borkowski's astronomical approximation).
_BREAKS = [
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
]

MIN_YEAR = 1
MAX_YEAR = _BREAKS[-1] - 1

MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7

# 0001-01-06 (ordinal 6) is a Saturday, the first day of the Persian week
WEEKDAY_OFFSET = 1

# days elapsed before the first of each month, Farvardin..Esfand
_DAYS_BEFORE_MONTH = [0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336]


@lru_cache(maxsize=4096)
def _jal_cal(year: int) -> Tuple[bool, int]:
    """Return (is_leap, march_day) for a Jalali year.

    march_day is the day of March (Gregorian year ``year + 621``) on which
    1 Farvardin falls.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfSupportedRange(year)

    gy = year + 621
    leap_j = -14
    jp = _BREAKS[0]
    jump = 0
    for jm in _BREAKS[1:]:
        jump = jm - jp
        if year < jm:
            break
        leap_j += jump // 33 * 8 + jump % 33 // 4
        jp = jm

    n = year - jp
    # leap years from AD 621 up to the start of this year, Jalali then Gregorian
    leap_j += n // 33 * 8 + (n % 33 + 3) // 4
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1
    leap_g = gy // 4 - (gy // 100 + 1) * 3 // 4 - 150
    march = 20 + leap_j - leap_g

    # years elapsed since the last leap year, 0 means this one is leap
    if jump - n < 6:
        n = n - jump + (jump + 4) // 33 * 33
    since_leap = (n + 1) % 33 - 1
    since_leap = 4 if since_leap == -1 else since_leap % 4
    return since_leap == 0, march


def is_leap_year(year: int) -> bool:
    return _jal_cal(year)[0]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidDate(year, month, 1)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(year) else 29


def farvardin_first(year: int) -> int:
    """Absolute day of Nowruz (1 Farvardin) of ``year``."""
    march = _jal_cal(year)[1]
    return datetime.date(year + 621, 3, 1).toordinal() + march - 1


def is_valid_date(year, month, day) -> bool:
    try:
        validate_date(year, month, day)
    except (InvalidDate, OutOfSupportedRange):
        return False
    return True


def validate_date(year, month, day) -> None:
    for part in (year, month, day):
        if not isinstance(part, int) or isinstance(part, bool):
            raise InvalidDate(year, month, day)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfSupportedRange(f"{year}/{month}/{day}")
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidDate(year, month, day)
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidDate(year, month, day)


def to_absolute_day(year: int, month: int, day: int) -> int:
    validate_date(year, month, day)
    return farvardin_first(year) + _DAYS_BEFORE_MONTH[month - 1] + day - 1


MIN_ABSOLUTE_DAY = farvardin_first(MIN_YEAR)
MAX_ABSOLUTE_DAY = farvardin_first(MAX_YEAR) + days_in_year(MAX_YEAR) - 1


def from_absolute_day(n: int) -> Tuple[int, int, int]:
    if not MIN_ABSOLUTE_DAY <= n <= MAX_ABSOLUTE_DAY:
        raise OutOfSupportedRange(n)

    year = datetime.date.fromordinal(n).year - 621
    # Jan..mid March still belongs to the previous Jalali year
    if year > MAX_YEAR or n < farvardin_first(year):
        year -= 1

    k = n - farvardin_first(year)
    if k < 186:
        return year, 1 + k // 31, 1 + k % 31
    k -= 186
    return year, 7 + k // 30, 1 + k % 30


def day_of_week(year: int, month: int, day: int) -> int:
    """0 = Saturday .. 6 = Friday."""
    return (to_absolute_day(year, month, day) + WEEKDAY_OFFSET) % DAYS_PER_WEEK


def first_day_offset(year: int, month: int) -> int:
    # number of blank cells before the 1st in a Saturday-first week
    return day_of_week(year, month, 1)


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> Tuple[int, int, int]:
    return from_absolute_day(datetime.date(gy, gm, gd).toordinal())


def jalali_to_gregorian(jy: int, jm: int, jd: int) -> Tuple[int, int, int]:
    g = datetime.date.fromordinal(to_absolute_day(jy, jm, jd))
    return g.year, g.month, g.day
