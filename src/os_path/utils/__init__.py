"""Utility modules for os_path."""

from .path_utils import PathUtils
from .console_base import ConsoleManager, StatusType

__all__ = ["PathUtils", "ConsoleManager", "StatusType"]
