"""
Platform-normalized path values.

An :class:`OsPath` is parsed from text that may mix ``/`` and ``\\``, and it
always renders with the separator of its platform conventions. Joining is
"false root" safe: a fragment that looks absolute is appended to the base
instead of replacing it, and leading ``..`` segments walk back up the base.

    >>> OsPath('/foo/bar').join('/baz.txt')
    OsPath('/foo/bar/baz.txt')
    >>> OsPath('/foo/bar/baz/').join('../../pow.txt')
    OsPath('/foo/pow.txt')

Traversal markers inside a single path are kept until :meth:`OsPath.resolve`
is called, since callers may want to see them.
"""

import logging
import os
import re
from functools import total_ordering
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .models import DEFAULT_CONVENTIONS, PlatformConventions
from ..utils.path_utils import PARENT, PathUtils

# Set up module logger
logger = logging.getLogger(__name__)

_DRIVE_ROOT = re.compile(r'^([A-Za-z]):[\\/]')
_DRIVE_COMPONENT = re.compile(r'^[A-Za-z]:$')
CURRENT = '.'

PathInput = Union[str, bytes, 'os.PathLike[Any]', 'OsPath']


def _coerce_text(path: Any) -> str:
    """Turn any accepted path input into text, decoding bytes lossily."""
    if isinstance(path, str):
        return path
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
        if isinstance(path, str):
            return path
    if isinstance(path, bytes):
        return path.decode('utf-8', errors='replace')
    raise TypeError(
        f"expected str, bytes, os.PathLike or OsPath, not {type(path).__name__}"
    )


@total_ordering
class OsPath:
    """A parsed path whose text output always follows platform conventions."""

    __hash__ = None  # mutable through push() and resolve()

    def __init__(self, path: PathInput = '',
                 conventions: Optional[PlatformConventions] = None):
        """
        Parse a path.

        Args:
            path: Text, bytes, a path-like object or another OsPath.
            conventions: Platform rules to parse and render with. Defaults to
                the conventions of the copied OsPath, else the configured ones.

        Raises:
            TypeError: If the argument cannot be read as path text.
        """
        if isinstance(path, OsPath) and conventions in (None, path.conventions):
            self.conventions = path.conventions
            self._components: List[str] = list(path._components)
            self._absolute = path._absolute
            self._directory = path._directory
            self._drive = path._drive
            return

        self.conventions = conventions or DEFAULT_CONVENTIONS
        if isinstance(path, OsPath):
            # Re-render under the new conventions.
            path = path.to_string()
        self._parse(_coerce_text(path))

    @classmethod
    def parse(cls, path: PathInput,
              conventions: Optional[PlatformConventions] = None) -> 'OsPath':
        """Alternate spelling of the constructor."""
        return cls(path, conventions)

    def _parse(self, text: str) -> None:
        drive = ''
        body = text
        match = _DRIVE_ROOT.match(text) if self.conventions.drive_letters else None
        if match:
            drive = match.group(1).upper()
            body = text[match.end():]

        self._absolute = match is not None or PathUtils.starts_with_separator(text)
        self._directory = PathUtils.ends_as_directory(text)
        self._drive = drive
        components = PathUtils.split_components(body)
        if (self.conventions.drive_letters and not self._absolute
                and components[:1] == [CURRENT] and len(components) > 1
                and _DRIVE_COMPONENT.match(components[1])):
            # '.\\C:' is how a relative path led by a drive-like name renders
            components = components[1:]
        self._components = components

    # -- merging -----------------------------------------------------------

    def _coerce(self, path: PathInput) -> 'OsPath':
        if isinstance(path, OsPath):
            return path
        return OsPath(path, self.conventions)

    def _is_identity(self) -> bool:
        return not self._components and not self._absolute

    def _settle_identity(self) -> None:
        # Nothing left of a relative path: it is the empty path, not a directory.
        if self._is_identity():
            self._directory = False

    def _pop(self) -> None:
        if self._components:
            self._components.pop()
        else:
            logger.debug(f"Ignoring '{PARENT}' past the start of '{self}'")

    def _merge(self, addition: 'OsPath') -> None:
        if not addition._components:
            return

        if self._is_identity():
            self.conventions = addition.conventions
            self._components = list(addition._components)
            self._absolute = addition._absolute
            self._directory = addition._directory
            self._drive = addition._drive
            return

        if addition._absolute:
            logger.debug(f"Appending false root '{addition}' to '{self}'")

        pending = list(addition._components)
        if not self._directory and pending[0] == PARENT:
            # '..' from a file first discards the file name itself
            logger.debug(f"Dropping file name of '{self}' for leading '{PARENT}'")
            self._pop()
            pending.pop(0)

        for component in pending:
            if component == PARENT:
                self._pop()
            else:
                self._components.append(component)
        self._directory = addition._directory
        self._settle_identity()

    def push(self, path: PathInput) -> None:
        """
        Append a path in place.

        The appended path is always relative to this one, even if its text
        starts with a root. A leading ``..`` applied to a file path removes
        the file name. The directory flag is taken from the appended path.

        Args:
            path: Anything the constructor accepts.
        """
        self._merge(self._coerce(path))

    def join(self, *paths: PathInput) -> 'OsPath':
        """
        Return a new path with each argument pushed in turn.

        Args:
            *paths: Anything the constructor accepts.

        Returns:
            The joined copy; this path is left untouched.
        """
        result = self.copy()
        for path in paths:
            result.push(path)
        return result

    def __truediv__(self, other: PathInput) -> 'OsPath':
        if not isinstance(other, (str, bytes, os.PathLike)):
            return NotImplemented
        return self.join(other)

    def __rtruediv__(self, other: PathInput) -> 'OsPath':
        if not isinstance(other, (str, bytes, os.PathLike)):
            return NotImplemented
        return OsPath(other, self.conventions).join(self)

    # -- resolution --------------------------------------------------------

    def resolve(self) -> None:
        """
        Collapse every ``..`` against the component before it, in place.

        This never looks at the filesystem. A ``..`` with nothing left to
        remove is dropped.
        """
        resolved: List[str] = []
        for component in self._components:
            if component != PARENT:
                resolved.append(component)
            elif resolved:
                resolved.pop()
        self._components = resolved
        self._settle_identity()

    def resolved(self) -> 'OsPath':
        """Return a resolved copy."""
        result = self.copy()
        result.resolve()
        return result

    # -- accessors ---------------------------------------------------------

    @property
    def components(self) -> Tuple[str, ...]:
        return tuple(self._components)

    @property
    def drive(self) -> str:
        return self._drive

    @property
    def name(self) -> Optional[str]:
        """Last component, or None for a path without components."""
        if self._components:
            return self._components[-1]
        return None

    @property
    def extension(self) -> Optional[str]:
        """Text after the last dot of the name, or None if it has no dot."""
        name = self.name
        if name is None or '.' not in name:
            return None
        return name.rsplit('.', 1)[-1]

    @property
    def parent(self) -> Optional['OsPath']:
        """
        The path without its last component, marked as a directory.

        An absolute path with one component has the bare root as its parent.
        A relative path with one component, and any path without components,
        has no parent.
        """
        if not self._components:
            return None
        if len(self._components) < 2 and not self._absolute:
            return None
        parent = self.copy()
        parent._components.pop()
        parent._directory = True
        return parent

    def is_absolute(self) -> bool:
        return self._absolute

    def is_dir(self) -> bool:
        return self._directory

    def is_file(self) -> bool:
        return not self._directory

    def exists(self) -> bool:
        """Ask the host filesystem whether the path exists."""
        return self.to_path().exists()

    # -- conversions -------------------------------------------------------

    @property
    def native_form(self) -> str:
        """Canonical native text without a trailing separator."""
        body = PathUtils.join_components(self._components, self.conventions.separator)
        if self._absolute:
            return self.conventions.render_root(self._drive) + body
        if (self.conventions.drive_letters and self._components
                and _DRIVE_COMPONENT.match(self._components[0])):
            # Keep a leading 'X:' component from reading back as a drive root.
            return CURRENT + self.conventions.separator + body
        return body

    def to_string(self) -> str:
        """Native text, ending in a separator when the path is a directory."""
        text = self.native_form
        if self._directory and self._components:
            text += self.conventions.separator
        return text

    def to_path(self) -> Path:
        return Path(self.native_form)

    def copy(self) -> 'OsPath':
        return OsPath(self)

    def __copy__(self) -> 'OsPath':
        return self.copy()

    def __deepcopy__(self, memo: Any) -> 'OsPath':
        return self.copy()

    def __fspath__(self) -> str:
        return self.native_form

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    # -- comparison --------------------------------------------------------

    def _sort_key(self) -> Tuple[Any, ...]:
        return (
            self.conventions.name,
            self._drive,
            not self._absolute,
            self._components,
            self._directory,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OsPath):
            return NotImplemented
        return (self.conventions == other.conventions
                and self._sort_key() == other._sort_key())

    def __lt__(self, other: 'OsPath') -> bool:
        if not isinstance(other, OsPath):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    # -- pydantic ----------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> 'OsPath':
        try:
            return cls(value)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from any path input; serialize as the display string."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_string()
            ),
        )
