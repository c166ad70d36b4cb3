# main.py
# Terminal demo of the jalali date picker: prints the displayed month and
# reads navigation / selection commands from stdin.
import logging

from calendar_helper import grid_rows
from config import DEFAULT_FIRST_DATE, DEFAULT_LAST_DATE, LOG_LEVEL
from errors import JalaliPickerError
from formatting import Formatter, to_ascii_digits
from models import JalaliDate
from picker import PickerController

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

QUIT = "quit"

HELP_TEXT = (
    "n / p : next / previous month\n"
    "N / P : next / previous year\n"
    "t     : go to today\n"
    "<day> : select a day of the displayed month\n"
    "ok    : confirm, c : cancel, q : quit"
)


def build_controller(formatter=None, clock=None):
    first = JalaliDate(*DEFAULT_FIRST_DATE)
    last = JalaliDate(*DEFAULT_LAST_DATE)
    today = JalaliDate.today(clock)
    # outside the demo range the picker opens on its first day
    initial = today if first <= today <= last else first
    return PickerController(initial, first, last, clock=clock, formatter=formatter)


def render_cell(cell, formatter):
    if cell.is_blank:
        return "    "
    text = formatter.format_decimal(cell.date.day).rjust(2)
    if cell.is_selected:
        return f"[{text}]"
    if cell.is_disabled:
        return " -- "
    if cell.is_today:
        return f"*{text} "
    return f" {text} "


def render_month(controller):
    formatter = controller.formatter
    lines = [
        controller.header_text(),
        controller.title_text(),
        "".join(f" {h:^2} " for h in controller.weekday_headers()),
    ]
    for week in grid_rows(controller.grid()):
        lines.append("".join(render_cell(cell, formatter) for cell in week).rstrip())
    return "\n".join(lines)


def handle_command(controller, text):
    """Apply one command to the controller; returns a status message or QUIT."""
    command = (text or "").strip()
    if not command:
        return ""
    if command in ("q", "c"):
        if command == "c":
            controller.cancel()
        return QUIT
    if command == "n":
        return "" if controller.request_next_month() else "already at the last month"
    if command == "p":
        return "" if controller.request_previous_month() else "already at the first month"
    if command == "N":
        return "" if controller.request_next_year() else "already at the last year"
    if command == "P":
        return "" if controller.request_previous_year() else "already at the first year"
    if command == "t":
        controller.go_to_today()
        return ""
    if command == "ok":
        selected = controller.confirm()
        return f"selected {controller.formatter.format_compact_date(selected)}"
    if command in ("?", "h", "help"):
        return HELP_TEXT

    command = to_ascii_digits(command)
    if command.isdigit():
        year, month = controller.displayed_month
        try:
            controller.select_day(JalaliDate(year, month, int(command)))
        except JalaliPickerError as e:
            return str(e)
        return ""
    return f"unknown command: {command!r}"


def main():
    controller = build_controller(formatter=Formatter())
    controller.add_selection_listener(lambda d: logger.info("Selected %s", d.isoformat()))
    controller.add_displayed_month_listener(lambda y, m: logger.debug("Showing %04d-%02d", y, m))
    print(HELP_TEXT)
    while True:
        print()
        print(render_month(controller))
        try:
            text = input("> ")
        except EOFError:
            break
        message = handle_command(controller, text)
        if message == QUIT:
            break
        if message:
            print(message)


if __name__ == "__main__":
    main()
