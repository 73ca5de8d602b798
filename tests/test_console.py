"""Tests for the themed console."""

import io

from os_path.utils import ConsoleManager, StatusType


def make_console(theme="manhattan"):
    buffer = io.StringIO()
    return ConsoleManager(theme=theme, file=buffer, force_plain=True), buffer


class TestConsoleManager:
    def test_status_types(self):
        """Only the statuses the CLI prints are defined."""
        assert {status.name for status in StatusType} == {"SUCCESS", "ERROR"}

    def test_print_error(self):
        console, buffer = make_console()
        console.print_error("boom")
        assert buffer.getvalue().strip() == "[x] boom"

    def test_print_success(self):
        console, buffer = make_console()
        console.print_success("EXISTS")
        assert buffer.getvalue().strip() == "[✓] EXISTS"

    def test_heading_value_is_not_markup(self):
        console, buffer = make_console()
        console.print_info_with_heading("PATH:", "a[b]/c")
        assert buffer.getvalue().strip() == "PATH: a[b]/c"

    def test_unknown_theme_falls_back(self):
        console, _ = make_console(theme="nope")
        assert console.theme_name == "manhattan"
