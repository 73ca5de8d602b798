"""Serializable description of an OsPath."""

import os
from typing import Any, List, Optional
from pydantic import BaseModel, Field, model_validator

from .models import get_conventions
from .os_path import OsPath


class PathReport(BaseModel):
    """Flags and accessor values of a single path."""
    path: OsPath
    native: str
    name: Optional[str] = None
    extension: Optional[str] = None
    parent: Optional[OsPath] = None
    platform: str
    absolute: bool
    directory: bool
    components: List[str] = Field(default_factory=list)
    exists: Optional[bool] = None  # Only filled in on request

    @model_validator(mode='before')
    @classmethod
    def parse_with_platform(cls, data: Any) -> Any:
        """Parse serialized paths with the conventions they were written under."""
        if not isinstance(data, dict) or not isinstance(data.get('platform'), str):
            return data
        conventions = get_conventions(data['platform'])
        data = dict(data)
        for key in ('path', 'parent'):
            value = data.get(key)
            if isinstance(value, (str, bytes)) or (
                isinstance(value, os.PathLike) and not isinstance(value, OsPath)
            ):
                data[key] = OsPath(value, conventions)
        return data

    @classmethod
    def from_path(cls, path: OsPath, check_exists: bool = False) -> 'PathReport':
        """
        Build a report for a path.

        Args:
            path: The path to describe.
            check_exists: Also query the filesystem. Errors from the host
                filesystem are not caught.
        """
        return cls(
            path=path,
            native=path.native_form,
            name=path.name,
            extension=path.extension,
            parent=path.parent,
            platform=path.conventions.name,
            absolute=path.is_absolute(),
            directory=path.is_dir(),
            components=list(path.components),
            exists=path.exists() if check_exists else None,
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(indent=indent)
