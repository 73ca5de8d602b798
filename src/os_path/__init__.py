"""Cross-platform path values with false-root safe joining."""

__version__ = "0.1.0"

from .core import (
    Config,
    OsPath,
    PathReport,
    PlatformConventions,
    DEFAULT_CONVENTIONS,
    POSIX,
    WINDOWS,
)

__all__ = [
    "Config",
    "OsPath",
    "PathReport",
    "PlatformConventions",
    "DEFAULT_CONVENTIONS",
    "POSIX",
    "WINDOWS",
]
