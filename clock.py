# clock.py
import datetime

import pytz

from config import TIMEZONE


class SystemClock:
    """Reads today's gregorian date in a fixed time zone."""

    def __init__(self, timezone=TIMEZONE):
        self.tz = pytz.timezone(timezone)

    def today_gregorian(self):
        today = datetime.datetime.now(self.tz).date()
        return today.year, today.month, today.day


class FixedClock:
    def __init__(self, year, month, day):
        self._today = (year, month, day)

    def today_gregorian(self):
        return self._today
