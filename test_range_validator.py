import pytest

from errors import InvalidInitialDate, InvalidRange
from models import DateRange, JalaliDate
from range_validator import contains, is_selectable, validate_initial_date, validate_range


def no_fridays(date):
    return date.weekday() != 6


def test_contains_is_inclusive(date_range):
    assert contains(date_range.first, date_range)
    assert contains(date_range.last, date_range)
    assert contains(JalaliDate(1403, 7, 15), date_range)
    assert not contains(date_range.first.add_days(-1), date_range)
    assert not contains(date_range.last.add_days(1), date_range)


def test_is_selectable_consults_predicate(date_range):
    # 1403/07/20 is a Friday
    friday = JalaliDate(1403, 7, 20)
    assert friday.weekday() == 6
    assert is_selectable(friday, date_range)
    assert not is_selectable(friday, date_range, no_fridays)
    assert is_selectable(friday.add_days(1), date_range, no_fridays)
    # out of range wins over the predicate
    assert not is_selectable(date_range.last.add_days(1), date_range, lambda d: True)


def test_containment_stops_past_the_last_day():
    r = DateRange(JalaliDate(1403, 12, 25), JalaliDate(1404, 1, 5))
    for k in range(1, 20):
        later = r.first.add_days(k)
        assert contains(later, r) == (k <= 10), k


def test_validate_range():
    r = validate_range(JalaliDate(1403, 1, 1), JalaliDate(1403, 1, 1))
    assert isinstance(r, DateRange)
    with pytest.raises(InvalidRange):
        validate_range(JalaliDate(1404, 1, 1), JalaliDate(1403, 12, 30))


def test_validate_initial_date(date_range):
    assert validate_initial_date(JalaliDate(1403, 7, 15), date_range) == JalaliDate(1403, 7, 15)
    with pytest.raises(InvalidInitialDate, match="on or after"):
        validate_initial_date(JalaliDate(1385, 7, 30), date_range)
    with pytest.raises(InvalidInitialDate, match="on or before"):
        validate_initial_date(JalaliDate(1450, 9, 30), date_range)
    with pytest.raises(InvalidInitialDate, match="predicate"):
        validate_initial_date(JalaliDate(1403, 7, 20), date_range, no_fridays)


def test_errors_are_value_errors(date_range):
    with pytest.raises(ValueError):
        validate_initial_date(JalaliDate(1300, 1, 1), date_range)
