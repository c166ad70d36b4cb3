# month_pager.py
# Page index <-> (year, month). Page 0 is the month of range.first.
from logic import add_months_jalali_preserve_day, months_between
from models import YearMonth, month_of


def page_index_of(year_month, date_range):
    """May be negative or past the last page when year_month is outside the range."""
    return months_between(date_range.first_month, year_month)


def year_month_of(page_index, date_range):
    first = date_range.first_month
    y, m, _ = add_months_jalali_preserve_day(first.year, first.month, 1, page_index)
    return YearMonth(y, m)


def page_count(date_range):
    return months_between(date_range.first_month, date_range.last_month) + 1


def clamp_page_index(page_index, date_range):
    return max(0, min(page_index, page_count(date_range) - 1))


def initial_page(date_range, initial_date):
    return clamp_page_index(page_index_of(month_of(initial_date), date_range), date_range)


def page_of_today(date_range, today):
    # always measured from range.first, never from the current page
    return clamp_page_index(months_between(date_range.first, today), date_range)


# Boundary checks drive whether navigation controls are enabled.
def is_first_month_displayed(displayed_month, date_range):
    return tuple(displayed_month) <= tuple(date_range.first_month)


def is_last_month_displayed(displayed_month, date_range):
    return tuple(displayed_month) >= tuple(date_range.last_month)


def is_first_year_displayed(displayed_month, date_range):
    return displayed_month[0] <= date_range.first.year


def is_last_year_displayed(displayed_month, date_range):
    return displayed_month[0] >= date_range.last.year
