import pytest

import main
from clock import FixedClock
from formatting import Formatter
from models import JalaliDate, YearMonth


@pytest.fixture
def controller():
    # 2024-10-06 is 1403/07/15, inside the demo range
    return main.build_controller(formatter=Formatter("en"), clock=FixedClock(2024, 10, 6))


def test_build_controller_opens_on_today(controller):
    assert controller.selected_date == JalaliDate(1403, 7, 15)
    assert controller.date_range.first == JalaliDate(1395, 8, 1)
    assert controller.date_range.last == JalaliDate(1445, 8, 30)


def test_build_controller_outside_range_opens_on_first_day():
    c = main.build_controller(formatter=Formatter("en"), clock=FixedClock(2000, 1, 1))
    assert c.selected_date == JalaliDate(1395, 8, 1)


def test_navigation_commands(controller):
    assert main.handle_command(controller, "n") == ""
    assert controller.displayed_month == YearMonth(1403, 8)
    main.handle_command(controller, "p")
    main.handle_command(controller, "p")
    assert controller.displayed_month == YearMonth(1403, 6)
    main.handle_command(controller, "N")
    assert controller.displayed_month == YearMonth(1404, 6)
    main.handle_command(controller, "P")
    main.handle_command(controller, "t")
    assert controller.displayed_month == YearMonth(1403, 7)


def test_boundary_messages(controller):
    controller.navigate_page(0)
    assert main.handle_command(controller, "p") == "already at the first month"
    assert main.handle_command(controller, "P") == "already at the first year"


def test_select_and_confirm(controller):
    main.handle_command(controller, "p")
    assert main.handle_command(controller, "12") == ""
    assert controller.selected_date == JalaliDate(1403, 6, 12)
    assert main.handle_command(controller, "۱۳") == ""
    assert controller.selected_date == JalaliDate(1403, 6, 13)
    assert main.handle_command(controller, "ok") == "selected 1403/06/13"


def test_invalid_day_keeps_selection(controller):
    message = main.handle_command(controller, "31")
    assert "Invalid Jalali date" in message
    assert controller.selected_date == JalaliDate(1403, 7, 15)


def test_quit_and_cancel(controller):
    cancelled = []
    controller.add_cancel_listener(cancelled.append)
    assert main.handle_command(controller, "q") == main.QUIT
    assert cancelled == []
    assert main.handle_command(controller, "c") == main.QUIT
    assert cancelled == [JalaliDate(1403, 7, 15)]


def test_other_input(controller):
    assert main.handle_command(controller, "") == ""
    assert main.handle_command(controller, "help") == main.HELP_TEXT
    assert main.handle_command(controller, "xyz") == "unknown command: 'xyz'"


def test_render_month(controller):
    text = main.render_month(controller)
    lines = text.splitlines()
    assert lines[0] == controller.header_text()
    assert lines[1] == controller.title_text()
    assert "[15]" in text
    # 1403/07/01 is a Sunday: one blank cell first
    assert lines[3].startswith(" " * 6 + "1 ")


def test_confirm_message_uses_locale_digits():
    c = main.build_controller(formatter=Formatter("fa"), clock=FixedClock(2024, 10, 6))
    assert main.handle_command(c, "ok") == "selected ۱۴۰۳/۰۷/۱۵"
