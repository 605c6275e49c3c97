"""
Entry collector port interface defining the contract for reading listed paths.
"""

from abc import ABC, abstractmethod

from dirlist.entities.Entry import Entry


class EntryCollectorPort(ABC):
    """Port interface for collecting the entries under a path."""

    @abstractmethod
    def collect(self, path: str, show_all: bool = False) -> list[Entry]:
        """
        Collect the entries a path lists as.

        Args:
            path: Directory whose direct children are collected, or a single
                non-directory path that is collected as one entry
            show_all: Whether to keep children whose name starts with a dot

        Returns:
            List of Entry records in enumeration order

        Raises:
            PathNotFoundError: If the path does not exist
            PathUnreadableError: If the path exists but cannot be read
        """
        pass

    @abstractmethod
    def collect_single(self, path: str) -> Entry:
        """
        Collect one path as a single entry, without listing its children.

        Args:
            path: Any existing path, directories included

        Returns:
            Entry named after the path as given

        Raises:
            PathNotFoundError: If the path does not exist
            PathUnreadableError: If the path cannot be accessed
        """
        pass
