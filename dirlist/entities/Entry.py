"""
Entry domain entity.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class EntryKind(str, Enum):
    """Kind of filesystem object an entry points at."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    FIFO = "fifo"
    SOCKET = "socket"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryKind":
        """Map an ``st_mode`` value to its kind."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.OTHER

    @property
    def indicator(self) -> str:
        """One-character type indicator shown in the first long-form column."""
        return _INDICATORS[self]


_INDICATORS: dict[EntryKind, str] = {
    EntryKind.FILE: "-",
    EntryKind.DIRECTORY: "d",
    EntryKind.SYMLINK: "l",
    EntryKind.BLOCK_DEVICE: "b",
    EntryKind.CHAR_DEVICE: "c",
    EntryKind.FIFO: "p",
    EntryKind.SOCKET: "s",
    EntryKind.OTHER: "?",
}


@dataclass(eq=False)
class Entry:
    """
    Filesystem entry discovered during one listing run.

    The collector fills ``name``, ``path`` and ``stat``; the attribute
    resolver decorates the remaining fields in place.
    """

    name: str
    path: str
    stat: Optional[os.stat_result] = None
    kind: EntryKind = EntryKind.OTHER
    size_bytes: int = 0
    created_at: Optional[datetime] = None
    owner_id: Optional[int] = None
    group_id: Optional[int] = None
    owner_name: Optional[str] = None
    group_name: Optional[str] = None
    executable: bool = False
    link_target: Optional[str] = None

    @property
    def is_hidden(self) -> bool:
        return os.path.basename(self.name).startswith(".")

    def __str__(self) -> str:
        return f"Entry(name='{self.name}', size={self.size_bytes}, kind='{self.kind.value}')"

    def __repr__(self) -> str:
        return f"Entry(path='{self.path}')"
