"""
Core configuration models for os_path.

This module holds the platform conventions that decide how paths are
recognised as absolute and how they are rendered, together with the
environment-driven configuration that selects them.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Literal
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


PlatformName = Literal['auto', 'posix', 'windows']


@dataclass(frozen=True)
class PlatformConventions:
    """Root and separator rules for one platform family."""

    name: str
    separator: str
    root_marker: str
    drive_letters: bool = False  # Whether an ``X:\`` prefix marks a root

    def render_root(self, drive: str = '') -> str:
        """Render the root prefix for an absolute path."""
        if drive and self.drive_letters:
            return f"{drive}:{self.root_marker}"
        return self.root_marker


POSIX = PlatformConventions(name='posix', separator='/', root_marker='/')
WINDOWS = PlatformConventions(
    name='windows',
    separator='\\',
    root_marker='\\',
    drive_letters=True,
)

CONVENTIONS: Dict[str, PlatformConventions] = {
    'posix': POSIX,
    'windows': WINDOWS,
}


def host_platform() -> str:
    """Name of the conventions matching the running interpreter."""
    return 'windows' if os.name == 'nt' else 'posix'


def get_conventions(name: str) -> PlatformConventions:
    """
    Look up platform conventions by name.

    Args:
        name: 'posix', 'windows' or 'auto' for the host platform

    Returns:
        The matching PlatformConventions

    Raises:
        ValueError: If the name is not a known platform
    """
    key = (name or 'auto').strip().lower()
    if key == 'auto':
        key = host_platform()
    try:
        return CONVENTIONS[key]
    except KeyError:
        known = ', '.join(['auto', *CONVENTIONS])
        raise ValueError(f"Unknown platform '{name}' (expected one of: {known})") from None


@dataclass
class Config:
    """Configuration settings for os_path."""

    platform: str = field(default_factory=lambda: os.getenv('OS_PATH_PLATFORM', 'auto'))
    theme: str = field(default_factory=lambda: os.getenv('OS_PATH_THEME', 'manhattan'))

    def conventions(self) -> PlatformConventions:
        """Resolve the configured platform to its conventions."""
        return get_conventions(self.platform)


# Resolved once at import; individual paths may be given other conventions.
DEFAULT_CONVENTIONS: PlatformConventions = Config().conventions()
