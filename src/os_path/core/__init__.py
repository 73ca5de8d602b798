"""Core components for os_path."""

from .models import Config, PlatformConventions, DEFAULT_CONVENTIONS, POSIX, WINDOWS, get_conventions
from .os_path import OsPath
from .report import PathReport

__all__ = [
    "Config",
    "PlatformConventions",
    "DEFAULT_CONVENTIONS",
    "POSIX",
    "WINDOWS",
    "get_conventions",
    "OsPath",
    "PathReport",
]
