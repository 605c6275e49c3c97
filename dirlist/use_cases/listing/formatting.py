"""
Rendering of single entries into display strings.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from rich.style import Style
from rich.text import Text

from dirlist.config.listing import ListingConfiguration
from dirlist.config.settings import DEFAULT_TIME_FORMAT
from dirlist.entities.Entry import Entry, EntryKind

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
UNIT_BASE = 1024

TIME_PLACEHOLDER = "-"
ID_PLACEHOLDER = "?"


class Column(str, Enum):
    """Columns of the long form, in display order."""

    TYPE = "type"
    SIZE = "size"
    CREATED = "created"
    OWNER = "owner"
    GROUP = "group"
    NAME = "name"


LONG_COLUMNS: tuple[Column, ...] = (
    Column.TYPE,
    Column.SIZE,
    Column.CREATED,
    Column.OWNER,
    Column.GROUP,
    Column.NAME,
)
RIGHT_ALIGNED = frozenset({Column.SIZE})

_KIND_STYLES: dict[EntryKind, Style] = {
    EntryKind.DIRECTORY: Style(color="bright_blue"),
    EntryKind.SYMLINK: Style(color="bright_cyan"),
    EntryKind.BLOCK_DEVICE: Style(color="bright_yellow"),
    EntryKind.CHAR_DEVICE: Style(color="bright_magenta"),
}
EXECUTABLE_STYLE = Style(color="bright_green")


def style_for(kind: EntryKind, executable: bool = False) -> Style:
    """
    Style used to colour an entry name.

    Defined for every kind; kinds without a colour get the null style.
    """
    if kind is EntryKind.FILE and executable:
        return EXECUTABLE_STYLE
    return _KIND_STYLES.get(kind, Style.null())


def _significant(value: float) -> str:
    # at most three significant digits, one decimal below ten
    if value < 10:
        text = f"{value:.1f}"
        return text[:-2] if text.endswith(".0") else text
    return f"{value:.0f}"


def format_size(size_bytes: int, human_readable: bool = False) -> str:
    """
    Render a byte count.

    Human-readable sizes use the largest 1024-based unit the value reaches
    and keep at most three significant digits: ``1023 -> "1023B"``,
    ``1024 -> "1KB"``, ``1536 -> "1.5KB"``. A value that rounds up to 1024
    of one unit is shown as 1 of the next: ``1048575 -> "1MB"``.
    """
    if not human_readable:
        return str(size_bytes)

    exponent = 0
    while exponent < len(SIZE_UNITS) - 1 and size_bytes >= UNIT_BASE ** (exponent + 1):
        exponent += 1
    if exponent == 0:
        return f"{size_bytes}B"

    text = _significant(size_bytes / UNIT_BASE**exponent)
    if float(text) >= UNIT_BASE and exponent < len(SIZE_UNITS) - 1:
        exponent += 1
        text = _significant(size_bytes / UNIT_BASE**exponent)
    return f"{text}{SIZE_UNITS[exponent]}"


def printable(text: str) -> str:
    """
    Make a filesystem string safe to print.

    Bytes that were not valid UTF-8 come back from the OS as surrogate
    escapes; they are shown as ``\\xNN`` instead.
    """
    return os.fsencode(text).decode("utf-8", "backslashreplace")


@dataclass(frozen=True)
class FormattedRow:
    """Display strings of one entry, plus its styled name."""

    fields: dict[Column, str]
    name: Text

    def cell(self, column: Column) -> str:
        return self.fields[column]


class EntryFormatter:
    """Turn resolved entries into display rows for one listing configuration."""

    def __init__(self, config: ListingConfiguration, time_format: str = DEFAULT_TIME_FORMAT):
        self._config = config
        self._time_format = time_format

    def format_time(self, created_at: Optional[datetime]) -> str:
        if created_at is None:
            return TIME_PLACEHOLDER
        return created_at.strftime(self._time_format)

    def format_identity(self, ident: Optional[int], name: Optional[str]) -> str:
        """Name in named mode when it resolved, the numeric id otherwise."""
        if ident is None:
            return ID_PLACEHOLDER
        if self._config.numeric_ids or name is None:
            return str(ident)
        return name

    def format_name(self, entry: Entry) -> Text:
        style = style_for(entry.kind, entry.executable) if self._config.colourize else ""
        text = Text(printable(entry.name), style=style)
        if self._config.long_form and entry.link_target is not None:
            text.append(f" -> {printable(entry.link_target)}")
        return text

    def format(self, entry: Entry) -> FormattedRow:
        name = self.format_name(entry)
        fields = {
            Column.TYPE: entry.kind.indicator,
            Column.SIZE: format_size(entry.size_bytes, self._config.human_readable),
            Column.CREATED: self.format_time(entry.created_at),
            Column.OWNER: self.format_identity(entry.owner_id, entry.owner_name),
            Column.GROUP: self.format_identity(entry.group_id, entry.group_name),
            Column.NAME: name.plain,
        }
        return FormattedRow(fields=fields, name=name)
