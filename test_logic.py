import pytest

from logic import add_months_jalali_preserve_day, months_between
from models import JalaliDate, YearMonth


@pytest.mark.parametrize(
    "start,months,expected",
    [
        ((1403, 6, 31), 1, (1403, 7, 30)),
        ((1403, 1, 31), 1, (1403, 2, 31)),
        ((1403, 12, 30), 1, (1404, 1, 30)),
        ((1404, 1, 30), -1, (1403, 12, 30)),
        ((1405, 1, 31), -1, (1404, 12, 29)),
        ((1403, 5, 10), -17, (1401, 12, 10)),
    ],
)
def test_add_months_jalali_preserve_day(start, months, expected):
    assert add_months_jalali_preserve_day(*start, months) == expected


def test_months_between_accepts_dates_and_year_months():
    assert months_between(YearMonth(1385, 8), YearMonth(1450, 9)) == 781
    assert months_between(JalaliDate(1403, 12, 30), YearMonth(1404, 1)) == 1
    assert months_between(YearMonth(1404, 1), YearMonth(1403, 1)) == -12
