import pytest

from clock import FixedClock
from formatting import Formatter
from models import DateRange, JalaliDate


@pytest.fixture
def fixed_clock():
    # 2024-10-06 is 1403/07/15
    return FixedClock(2024, 10, 6)


@pytest.fixture
def date_range():
    return DateRange(JalaliDate(1385, 8, 1), JalaliDate(1450, 9, 29))


@pytest.fixture
def en_formatter():
    return Formatter("en")
