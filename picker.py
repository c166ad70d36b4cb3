# picker.py
# Picker session: current page, displayed month and selection for one date picker.
#
# Each command computes a new PickerState with a pure transition function and
# swaps it in only after validation succeeded, then notifies listeners.
# Not thread safe: the host serializes calls (e.g. on its UI thread).
import logging
from dataclasses import replace

import month_pager
from calendar_helper import build_grid, weekday_headers
from clock import SystemClock
from errors import InvalidSelection
from formatting import default_formatter
from models import JalaliDate, PickerState, month_of
from range_validator import is_selectable, validate_initial_date, validate_range

logger = logging.getLogger(__name__)

MONTHS_PER_PAGE_JUMP = 1
MONTHS_PER_YEAR_JUMP = 12


def select_day_transition(state, date, date_range, predicate=None):
    if not is_selectable(date, date_range, predicate):
        raise InvalidSelection(date)
    displayed = month_of(date)
    if displayed == state.displayed_month:
        return replace(state, selected_date=date)
    return PickerState(displayed, date, month_pager.page_index_of(displayed, date_range))


def navigate_page_transition(state, page_index, date_range):
    page = month_pager.clamp_page_index(page_index, date_range)
    return replace(
        state,
        displayed_month=month_pager.year_month_of(page, date_range),
        current_page=page,
    )


class PickerController:
    def __init__(self, initial_date, first_date, last_date, predicate=None,
                 clock=None, formatter=None,
                 on_selection_changed=None, on_displayed_month_changed=None,
                 on_confirm=None, on_cancel=None):
        self.date_range = validate_range(first_date, last_date)
        validate_initial_date(initial_date, self.date_range, predicate)
        self.predicate = predicate
        self.clock = clock or SystemClock()
        self.formatter = formatter or default_formatter()

        self._state = PickerState(
            month_of(initial_date),
            initial_date,
            month_pager.initial_page(self.date_range, initial_date),
        )
        self._listeners = {"selection": [], "month": [], "confirm": [], "cancel": []}
        for kind, callback in (("selection", on_selection_changed),
                               ("month", on_displayed_month_changed),
                               ("confirm", on_confirm),
                               ("cancel", on_cancel)):
            if callback is not None:
                self._subscribe(kind, callback)

        logger.debug("Picker opened on %s, range %s..%s", initial_date, self.date_range.first, self.date_range.last)

    # ---- state ----
    @property
    def state(self):
        return self._state

    @property
    def selected_date(self):
        return self._state.selected_date

    @property
    def displayed_month(self):
        return self._state.displayed_month

    @property
    def current_page(self):
        return self._state.current_page

    @property
    def page_count(self):
        return month_pager.page_count(self.date_range)

    def today(self):
        return JalaliDate.today(self.clock)

    # ---- listeners ----
    def _subscribe(self, kind, callback):
        self._listeners[kind].append(callback)

        def unsubscribe():
            if callback in self._listeners[kind]:
                self._listeners[kind].remove(callback)
        return unsubscribe

    def add_selection_listener(self, callback):
        """callback(date)"""
        return self._subscribe("selection", callback)

    def add_displayed_month_listener(self, callback):
        """callback(year, month)"""
        return self._subscribe("month", callback)

    def add_confirm_listener(self, callback):
        return self._subscribe("confirm", callback)

    def add_cancel_listener(self, callback):
        return self._subscribe("cancel", callback)

    def _notify(self, kind, *args):
        for callback in list(self._listeners[kind]):
            try:
                callback(*args)
            except Exception:
                # the transition is already committed; keep notifying the rest
                logger.exception("Picker %s listener failed", kind)

    def _commit(self, new_state):
        old_state = self._state
        self._state = new_state
        logger.debug("Picker state %s -> %s", old_state, new_state)
        return old_state

    # ---- commands ----
    def select_day(self, date):
        try:
            new_state = select_day_transition(self._state, date, self.date_range, self.predicate)
        except InvalidSelection:
            logger.info("Rejected selection of %s", date)
            raise
        old_state = self._commit(new_state)
        self._notify("selection", date)
        if new_state.displayed_month != old_state.displayed_month:
            self._notify("month", *new_state.displayed_month)
        return date

    def navigate_page(self, page_index):
        new_state = navigate_page_transition(self._state, page_index, self.date_range)
        if new_state.displayed_month == self._state.displayed_month:
            return False
        self._commit(new_state)
        self._notify("month", *new_state.displayed_month)
        return True

    def _request(self, at_boundary, delta):
        if at_boundary(self._state.displayed_month, self.date_range):
            logger.debug("Navigation by %+d ignored at range boundary", delta)
            return False
        return self.navigate_page(self._state.current_page + delta)

    def request_next_month(self):
        return self._request(month_pager.is_last_month_displayed, MONTHS_PER_PAGE_JUMP)

    def request_previous_month(self):
        return self._request(month_pager.is_first_month_displayed, -MONTHS_PER_PAGE_JUMP)

    def request_next_year(self):
        return self._request(month_pager.is_last_year_displayed, MONTHS_PER_YEAR_JUMP)

    def request_previous_year(self):
        return self._request(month_pager.is_first_year_displayed, -MONTHS_PER_YEAR_JUMP)

    def go_to_today(self):
        """Show the month of today (clamped into the range); the selection is kept."""
        page = month_pager.page_of_today(self.date_range, self.today())
        self.navigate_page(page)
        return page

    def confirm(self):
        self._notify("confirm", self._state.selected_date)
        return self._state.selected_date

    def cancel(self):
        self._notify("cancel", self._state.selected_date)

    # ---- navigation control state ----
    @property
    def can_go_previous_month(self):
        return not month_pager.is_first_month_displayed(self.displayed_month, self.date_range)

    @property
    def can_go_next_month(self):
        return not month_pager.is_last_month_displayed(self.displayed_month, self.date_range)

    @property
    def can_go_previous_year(self):
        return not month_pager.is_first_year_displayed(self.displayed_month, self.date_range)

    @property
    def can_go_next_year(self):
        return not month_pager.is_last_year_displayed(self.displayed_month, self.date_range)

    # ---- snapshots for the presentation layer ----
    def grid(self, page_index=None):
        """Day cells of the displayed month, or of another page (a page view pre-builds neighbours)."""
        if page_index is None:
            displayed = self._state.displayed_month
        else:
            displayed = month_pager.year_month_of(month_pager.clamp_page_index(page_index, self.date_range), self.date_range)
        return build_grid(displayed, self._state.selected_date, self.today(), self.date_range, self.predicate)

    def weekday_headers(self):
        return weekday_headers(self.formatter)

    def header_text(self):
        return self.formatter.format_medium_date(self._state.selected_date)

    def title_text(self):
        return self.formatter.format_month_year(self._state.displayed_month.first_day())
