# errors.py
# Every error is a ValueError so callers that only guard against bad values keep working.


class JalaliPickerError(ValueError):
    pass


class InvalidDate(JalaliPickerError):
    def __init__(self, year, month, day):
        self.year, self.month, self.day = year, month, day
        if month is None:
            super().__init__(f"Invalid Jalali date: {year!r}")
        else:
            super().__init__(f"Invalid Jalali date: {year}/{month}/{day}")


class OutOfSupportedRange(JalaliPickerError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Outside the supported Jalali calendar range: {value}")


class InvalidRange(JalaliPickerError):
    def __init__(self, first, last):
        self.first, self.last = first, last
        super().__init__(f"lastDate {last} must be on or after firstDate {first}")


class InvalidInitialDate(JalaliPickerError):
    def __init__(self, date, reason="is not selectable"):
        self.date = date
        super().__init__(f"initialDate {date} {reason}")


class InvalidSelection(JalaliPickerError):
    def __init__(self, date):
        self.date = date
        super().__init__(f"{date} is not a selectable date")
