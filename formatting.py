# formatting.py
# Display strings for jalali dates. Locale is passed in explicitly, never read
# from ambient state; only the default formatter falls back to config.
import jdatetime

from config import DEFAULT_LOCALE

LOCALES = ("fa", "en")

_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
_ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN = str.maketrans("0123456789", _PERSIAN_DIGITS)
_TO_ASCII = str.maketrans(_PERSIAN_DIGITS + _ARABIC_DIGITS, "0123456789" * 2)

# Saturday first
_NARROW_WEEKDAYS_FA = ["ش", "ی", "د", "س", "چ", "پ", "ج"]


def to_persian_digits(text):
    return str(text).translate(_TO_PERSIAN)


def to_ascii_digits(text):
    return str(text).translate(_TO_ASCII)


class Formatter:
    def __init__(self, locale=DEFAULT_LOCALE, native_digits=None):
        if locale not in LOCALES:
            raise ValueError(f"Unsupported locale: {locale!r}")
        self.locale = locale
        # persian digits by default for "fa"
        self.native_digits = (locale == "fa") if native_digits is None else native_digits

    def format_decimal(self, value) -> str:
        text = str(value)
        return to_persian_digits(text) if self.native_digits else text

    def month_name(self, month: int) -> str:
        names = jdatetime.date.j_months_fa if self.locale == "fa" else jdatetime.date.j_months_en
        return names[month - 1]

    def weekday_name(self, weekday: int) -> str:
        """weekday: 0 = Saturday .. 6 = Friday"""
        names = jdatetime.date.j_weekdays_fa if self.locale == "fa" else jdatetime.date.j_weekdays_en
        return names[weekday]

    def narrow_weekdays(self):
        if self.locale == "fa":
            return list(_NARROW_WEEKDAYS_FA)
        return [name[0] for name in jdatetime.date.j_weekdays_en]

    def format_month_year(self, date) -> str:
        return f"{self.month_name(date.month)} {self.format_decimal(date.year)}"

    def format_full_date(self, date) -> str:
        sep = "،" if self.locale == "fa" else ","
        return (
            f"{self.weekday_name(date.weekday())}{sep} {self.format_decimal(date.day)} "
            f"{self.month_name(date.month)} {self.format_decimal(date.year)}"
        )

    def format_medium_date(self, date) -> str:
        # picker header: "weekday day month"
        return f"{self.weekday_name(date.weekday())} {self.format_decimal(date.day)} {self.month_name(date.month)}"

    def format_compact_date(self, date) -> str:
        return self.format_decimal(f"{date.year:04d}/{date.month:02d}/{date.day:02d}")


def default_formatter() -> Formatter:
    return Formatter(DEFAULT_LOCALE)
