# models.py
import datetime
import enum
import functools
import re
from dataclasses import dataclass
from typing import NamedTuple, Optional

import jdatetime

from calendar_math import (
    day_of_week,
    days_in_month,
    from_absolute_day,
    gregorian_to_jalali,
    is_leap_year,
    to_absolute_day,
    validate_date,
)
from clock import SystemClock
from errors import InvalidDate, InvalidRange
from formatting import default_formatter, to_ascii_digits
from logic import add_months_jalali_preserve_day, months_between

_DATE_RE = re.compile(r"^\s*(\d{1,4})[-/](\d{1,2})[-/](\d{1,2})\s*$")


@functools.total_ordering
class JalaliDate:
    """An immutable, validated Jalali calendar date.

    Ordering goes through the absolute day count, so any two dates compare
    the same way their gregorian equivalents do.
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int = 1, day: int = 1):
        validate_date(year, month, day)
        object.__setattr__(self, "_year", year)
        object.__setattr__(self, "_month", month)
        object.__setattr__(self, "_day", day)

    def __setattr__(self, name, value):
        raise AttributeError("JalaliDate is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through __init__, not slot by slot
        return (JalaliDate, (self._year, self._month, self._day))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    # ---- constructors ----
    @classmethod
    def today(cls, clock=None) -> "JalaliDate":
        """Today's date as reported by ``clock`` (the system clock by default)."""
        if clock is None:
            clock = SystemClock()
        return cls.from_gregorian(datetime.date(*clock.today_gregorian()))

    @classmethod
    def from_absolute_day(cls, n: int) -> "JalaliDate":
        return cls(*from_absolute_day(n))

    @classmethod
    def from_gregorian(cls, date_obj) -> "JalaliDate":
        # datetime.datetime is a date too; its time part is dropped
        return cls(*gregorian_to_jalali(date_obj.year, date_obj.month, date_obj.day))

    @classmethod
    def from_jdatetime(cls, jdate) -> "JalaliDate":
        return cls(jdate.year, jdate.month, jdate.day)

    @classmethod
    def parse(cls, text: str) -> "JalaliDate":
        """Parse ``1403-07-15`` or ``1403/7/15``; Persian digits are accepted."""
        match = _DATE_RE.match(to_ascii_digits(text or ""))
        if not match:
            raise InvalidDate(text, None, None)
        y, m, d = [int(x) for x in match.groups()]
        return cls(y, m, d)

    # ---- conversions ----
    def to_absolute_day(self) -> int:
        return to_absolute_day(self._year, self._month, self._day)

    def to_gregorian(self) -> datetime.date:
        return datetime.date.fromordinal(self.to_absolute_day())

    def to_jdatetime(self):
        return jdatetime.date(self._year, self._month, self._day)

    def isoformat(self) -> str:
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def year_month(self) -> "YearMonth":
        return YearMonth(self._year, self._month)

    def replace(self, year=None, month=None, day=None) -> "JalaliDate":
        return JalaliDate(
            self._year if year is None else year,
            self._month if month is None else month,
            self._day if day is None else day,
        )

    # ---- calendar facts ----
    def weekday(self) -> int:
        """0 = Saturday .. 6 = Friday."""
        return day_of_week(self._year, self._month, self._day)

    def days_in_month(self) -> int:
        return days_in_month(self._year, self._month)

    def is_leap(self) -> bool:
        return is_leap_year(self._year)

    # ---- ordering ----
    def _key(self):
        return (self._year, self._month, self._day)

    def is_before(self, other: "JalaliDate") -> bool:
        return self.to_absolute_day() < other.to_absolute_day()

    def is_after(self, other: "JalaliDate") -> bool:
        return self.to_absolute_day() > other.to_absolute_day()

    def equals(self, other: "JalaliDate") -> bool:
        return self.to_absolute_day() == other.to_absolute_day()

    def __eq__(self, other):
        if not isinstance(other, JalaliDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, JalaliDate):
            return NotImplemented
        return self.is_before(other)

    def __hash__(self):
        return hash(("JalaliDate",) + self._key())

    # ---- arithmetic ----
    def add_days(self, n: int) -> "JalaliDate":
        return JalaliDate.from_absolute_day(self.to_absolute_day() + n)

    def add_months(self, n: int) -> "JalaliDate":
        """Add ``n`` months; a day past the end of the target month is clamped to its last day."""
        return JalaliDate(*add_months_jalali_preserve_day(self._year, self._month, self._day, n))

    @staticmethod
    def months_between(a, b) -> int:
        return months_between(a, b)

    # ---- formatting hooks ----
    def format_month_year(self, formatter=None) -> str:
        return _formatter(formatter).format_month_year(self)

    def format_full_date(self, formatter=None) -> str:
        return _formatter(formatter).format_full_date(self)

    def format_medium_date(self, formatter=None) -> str:
        return _formatter(formatter).format_medium_date(self)

    def __str__(self):
        return self.isoformat()

    def __repr__(self):
        return f"JalaliDate({self._year}, {self._month}, {self._day})"


def _formatter(formatter):
    return formatter if formatter is not None else default_formatter()


class YearMonth(NamedTuple):
    year: int
    month: int

    def first_day(self) -> JalaliDate:
        return JalaliDate(self.year, self.month, 1)

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}"


def month_of(date) -> YearMonth:
    return YearMonth(date.year, date.month)


@dataclass(frozen=True)
class DateRange:
    first: JalaliDate
    last: JalaliDate

    def __post_init__(self):
        if self.first.is_after(self.last):
            raise InvalidRange(self.first, self.last)

    @property
    def first_month(self) -> YearMonth:
        return month_of(self.first)

    @property
    def last_month(self) -> YearMonth:
        return month_of(self.last)


class CellKind(enum.Enum):
    blank = "blank"
    day = "day"


@dataclass(frozen=True)
class DayCell:
    kind: CellKind
    date: Optional[JalaliDate] = None
    is_selected: bool = False
    is_today: bool = False
    is_disabled: bool = False

    @classmethod
    def blank(cls) -> "DayCell":
        return cls(CellKind.blank)

    @classmethod
    def for_day(cls, date, is_selected=False, is_today=False, is_disabled=False) -> "DayCell":
        return cls(CellKind.day, date, is_selected, is_today, is_disabled)

    @property
    def is_blank(self) -> bool:
        return self.kind is CellKind.blank


@dataclass(frozen=True)
class PickerState:
    displayed_month: YearMonth
    selected_date: JalaliDate
    current_page: int
