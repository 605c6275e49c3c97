"""
Local file system adapter implementation for collecting entries.
"""

import logging
import os

from typing_extensions import override

from dirlist.entities.Entry import Entry
from dirlist.exceptions import (
    FileRepositoryError,
    PathNotFoundError,
    PathUnreadableError,
)
from dirlist.ports.files.entry_collector_port import EntryCollectorPort


class LocalFileSystemAdapter(EntryCollectorPort):
    """Local file system implementation of the entry collector port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _stat_path(self, path: str) -> os.stat_result:
        """
        Read the metadata of a listed path without following a final symlink.

        Raises:
            PathNotFoundError: If the path does not exist
            PathUnreadableError: If the path cannot be accessed
        """
        try:
            return os.lstat(path)
        except FileNotFoundError:
            raise PathNotFoundError(path)
        except PermissionError:
            raise PathUnreadableError(path)
        except OSError as e:
            raise PathUnreadableError(path, e.strerror or str(e))

    def _create_entries(self, directory: str, show_all: bool) -> list[Entry]:
        """
        Create Entry records for the direct children of a directory.

        Args:
            directory: Directory to enumerate
            show_all: Whether to keep dot-prefixed names

        Returns:
            List of Entry records in enumeration order
        """
        entries: list[Entry] = []
        with os.scandir(directory) as it:
            for item in it:
                entry = Entry(name=item.name, path=item.path)
                if not show_all and entry.is_hidden:
                    continue
                try:
                    entry.stat = item.stat(follow_symlinks=False)
                except OSError as e:
                    # Keep the entry; its attributes degrade to placeholders
                    self._logger.warning(f"Could not read metadata of {item.path}: {e}")
                entries.append(entry)
        return entries

    @override
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
        return Entry(name=path, path=path, stat=self._stat_path(path))

    @override
    def collect(self, path: str, show_all: bool = False) -> list[Entry]:
        """
        Collect the entries a path lists as.

        Args:
            path: Directory to enumerate, or a single non-directory path
            show_all: Whether to keep children whose name starts with a dot

        Returns:
            List of Entry records

        Raises:
            PathNotFoundError: If the path does not exist
            PathUnreadableError: If the path exists but cannot be read
        """
        try:
            entry = self.collect_single(path)
            if not os.path.isdir(path):
                return [entry]
            return self._create_entries(path, show_all)

        except FileRepositoryError:
            raise
        except FileNotFoundError:
            raise PathNotFoundError(path)
        except PermissionError:
            raise PathUnreadableError(path)
        except Exception as e:
            raise FileRepositoryError(f"Failed to list entries in {path}: {str(e)}")
