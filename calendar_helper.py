# calendar_helper.py
# Day grid for one displayed jalali month (weeks start on Saturday)
from calendar_math import DAYS_PER_WEEK, days_in_month, first_day_offset
from models import DayCell, JalaliDate
from range_validator import is_selectable

COLUMN_COUNT = DAYS_PER_WEEK
# a 31 day month that starts on a Friday
MAX_ROW_COUNT = 6


def _same_day(a, b):
    return b is not None and (a.year, a.month, a.day) == (b.year, b.month, b.day)


def build_grid(displayed_month, selected_date, current_date, date_range, predicate=None):
    """
    Cells for displayed_month: one blank per weekday before the 1st, then one
    day cell per day of the month. Nothing is padded after the last day.
    """
    year, month = displayed_month
    offset = first_day_offset(year, month)
    cells = [DayCell.blank() for _ in range(offset)]

    for day in range(1, days_in_month(year, month) + 1):
        date = JalaliDate(year, month, day)
        cells.append(DayCell.for_day(
            date,
            is_selected=_same_day(date, selected_date),
            is_today=_same_day(date, current_date),
            is_disabled=not is_selectable(date, date_range, predicate),
        ))
    return cells


def grid_rows(cells):
    """Split grid cells into weeks of 7; only the last week is padded with blanks."""
    rows = []
    week = []
    for cell in cells:
        week.append(cell)
        if len(week) == COLUMN_COUNT:
            rows.append(week)
            week = []
    if week:
        week.extend(DayCell.blank() for _ in range(COLUMN_COUNT - len(week)))
        rows.append(week)
    return rows


def weekday_headers(formatter):
    # Saturday .. Friday
    return formatter.narrow_weekdays()
