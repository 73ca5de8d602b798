"""Path text utilities for separator normalization across platforms."""

from typing import List

# Stands in for every separator before splitting. NUL never appears in a
# real path, so it cannot collide with path text.
SENTINEL = '\x00'
SEPARATORS = ('/', '\\')
PARENT = '..'


class PathUtils:
    """Utilities for consistent path text handling across platforms."""

    @staticmethod
    def normalize_separators(path: str) -> str:
        """
        Replace every forward and backward slash with the sentinel.

        Args:
            path: Path text with potentially mixed separators

        Returns:
            Text where each separator character is the sentinel
        """
        return path.replace('/', SENTINEL).replace('\\', SENTINEL)

    @staticmethod
    def split_components(path: str) -> List[str]:
        """
        Normalize path text and split it into non-empty components.

        Repeated or mixed separators never produce empty components, so
        ``/\\///\\foo///bar\\\\baz.txt`` yields ``['foo', 'bar', 'baz.txt']``.

        Args:
            path: Path text to split

        Returns:
            List of path components
        """
        normalized = PathUtils.normalize_separators(path)
        return [part for part in normalized.split(SENTINEL) if part]

    @staticmethod
    def starts_with_separator(path: str) -> bool:
        """Check whether text begins with either slash style."""
        return path.startswith(SEPARATORS)

    @staticmethod
    def ends_as_directory(path: str) -> bool:
        """Check whether text ends with a separator or a parent marker."""
        return path.endswith(SEPARATORS) or path.endswith(PARENT)

    @staticmethod
    def join_components(components: List[str], separator: str) -> str:
        """
        Join path components with the given separator.

        Args:
            components: List of path components
            separator: Native separator character

        Returns:
            Joined path text
        """
        return separator.join(components)
