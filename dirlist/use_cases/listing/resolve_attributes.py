"""
Attribute resolution for collected entries.
"""

import logging
import os
import stat
from datetime import datetime
from typing import Iterable, Optional

from dirlist.entities.Entry import Entry, EntryKind
from dirlist.exceptions import MetadataUnavailableError
from dirlist.ports.identity.identity_resolver_port import IdentityResolverPort

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

# Kinds whose st_size is a byte length worth showing
_SIZED_KINDS = frozenset({EntryKind.FILE, EntryKind.SYMLINK})


def created_at_from_stat(st: os.stat_result) -> datetime:
    """
    Creation time of an entry, in local time.

    Uses ``st_birthtime`` where the platform records it and the inode change
    time otherwise.

    Raises:
        MetadataUnavailableError: If the timestamp cannot be represented
    """
    timestamp = getattr(st, "st_birthtime", None)
    if timestamp is None:
        timestamp = st.st_ctime
    try:
        return datetime.fromtimestamp(timestamp).astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise MetadataUnavailableError(f"Invalid creation timestamp {timestamp!r}: {e}")


class AttributeResolver:
    """Decorate raw entries with kind, size, creation time and identity."""

    def __init__(
        self,
        identity_resolver: IdentityResolverPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the resolver.

        Args:
            identity_resolver: Port used to turn owner and group ids into names
            logger: Logger instance to use for logging
        """
        self._identity_resolver = identity_resolver
        self._logger = logger or logging.getLogger(__name__)

    def resolve(self, entry: Entry, numeric_ids: bool = False) -> Entry:
        """
        Fill in the derived attributes of an entry.

        Args:
            entry: Entry produced by a collector
            numeric_ids: Skip name lookups and keep only numeric ids

        Returns:
            The same entry, decorated in place
        """
        st = entry.stat
        if st is None:
            self._logger.debug(f"No metadata for {entry.path}, using placeholders")
            return entry

        entry.kind = EntryKind.from_mode(st.st_mode)
        entry.size_bytes = st.st_size if entry.kind in _SIZED_KINDS else 0
        entry.executable = entry.kind is EntryKind.FILE and bool(st.st_mode & _EXECUTE_BITS)
        entry.owner_id = st.st_uid
        entry.group_id = st.st_gid

        try:
            entry.created_at = created_at_from_stat(st)
        except MetadataUnavailableError as e:
            self._logger.warning(f"Creation time unavailable for {entry.path}: {e}")
            entry.created_at = None

        if not numeric_ids:
            entry.owner_name = self._identity_resolver.user_name(st.st_uid)
            entry.group_name = self._identity_resolver.group_name(st.st_gid)

        if entry.kind is EntryKind.SYMLINK:
            try:
                entry.link_target = os.readlink(entry.path)
            except OSError as e:
                self._logger.warning(f"Could not read link target of {entry.path}: {e}")

        return entry

    def resolve_all(self, entries: Iterable[Entry], numeric_ids: bool = False) -> list[Entry]:
        """Resolve every entry, keeping collection order."""
        return [self.resolve(entry, numeric_ids) for entry in entries]
