"""Themed console output for the os-path command line.

Wraps a Rich console with named colour themes and status-line helpers.
Plain (uncoloured) output is used when ``NO_COLOR`` is set or when the
caller asks for it.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success")
    ERROR = ("[x]", "error")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    error: str
    success: str
    path: str
    number: str
    dim: str
    heading: str = "bright_yellow"


THEMES: Dict[str, ThemeColors] = {
    'manhattan': ThemeColors(
        error='red',
        success='green',
        path='white',
        number='bright_blue',
        dim='bright_black',
    ),
    'green': ThemeColors(
        error='red',
        success='bright_green',
        path='bright_green',
        number='green',
        dim='green',
        heading='bright_cyan',
    ),
    'sunset': ThemeColors(
        error='red3',
        success='green',
        path='wheat1',
        number='orange1',
        dim='grey50',
        heading='dark_orange3',
    ),
}


class ConsoleManager:
    """Console with theme support and plain-text mode."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize the console.

        Args:
            theme: Theme name from THEMES; unknown names fall back to manhattan
            file: Output file (defaults to sys.stdout)
            force_plain: Disable colour and markup styling
        """
        self.theme_name = theme if theme in THEMES else 'manhattan'
        self.theme_colors = THEMES[self.theme_name]
        self.file = file or sys.stdout
        self.plain = force_plain or bool(os.environ.get('NO_COLOR'))

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=self.plain,
            color_system=None if self.plain else "auto",
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'error': colors.error,
            'success': colors.success,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
            'heading': colors.heading,
        })

    def print(self, *args, **kwargs):
        """Print through the Rich console."""
        self.console.print(*args, **kwargs)

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, style = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=style)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        self.print_status(StatusType.SUCCESS, message)

    def print_info_with_heading(self, heading: str, value: str):
        """Print a coloured heading followed by a plain value."""
        text = Text()
        text.append(heading, style="heading")
        text.append(f" {value}")
        self.console.print(text)

    def print_exception(self):
        self.console.print_exception()
