# range_validator.py
import logging

from errors import InvalidInitialDate, InvalidRange
from models import DateRange

logger = logging.getLogger(__name__)


def contains(date, date_range):
    return not date.is_before(date_range.first) and not date.is_after(date_range.last)


def is_selectable(date, date_range, predicate=None):
    """In range and, when a predicate is given, accepted by it."""
    return contains(date, date_range) and (predicate is None or bool(predicate(date)))


def validate_range(first, last):
    if first.is_after(last):
        logger.info("Rejected range %s..%s", first, last)
        raise InvalidRange(first, last)
    return DateRange(first, last)


def validate_initial_date(date, date_range, predicate=None):
    if date.is_before(date_range.first):
        raise InvalidInitialDate(date, f"must be on or after firstDate {date_range.first}")
    if date.is_after(date_range.last):
        raise InvalidInitialDate(date, f"must be on or before lastDate {date_range.last}")
    if predicate is not None and not predicate(date):
        raise InvalidInitialDate(date, "must satisfy the selectable day predicate")
    return date
