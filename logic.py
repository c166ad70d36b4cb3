# logic.py
# Month arithmetic on the Jalali calendar.
from calendar_math import MONTHS_PER_YEAR, days_in_month


def add_months_jalali_preserve_day(year, month, day, months):
    """
    Move ``months`` Jalali months away from (year, month, day), keeping the day.
    If the destination month is shorter the day is clamped to its last day
    (31 Shahrivar + 1 month -> 30 Mehr, 30 Esfand of a leap year + 12 -> 29 Esfand).
    returns: (year, month, day)
    """
    total = month + months
    new_y = year + (total - 1) // MONTHS_PER_YEAR
    new_m = (total - 1) % MONTHS_PER_YEAR + 1

    return new_y, new_m, min(day, days_in_month(new_y, new_m))


def months_between(start, end):
    """Whole months from start's month to end's month; the day of month is ignored."""
    return (end.year - start.year) * MONTHS_PER_YEAR + (end.month - start.month)
