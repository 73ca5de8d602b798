import pytest
import tempfile
import shutil
from functools import partial
from pathlib import Path

from os_path import OsPath, POSIX, WINDOWS


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for filesystem checks."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def posix():
    """Build OsPath values with POSIX conventions regardless of host."""
    return partial(OsPath, conventions=POSIX)


@pytest.fixture
def windows():
    """Build OsPath values with Windows conventions regardless of host."""
    return partial(OsPath, conventions=WINDOWS)
