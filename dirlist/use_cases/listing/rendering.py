"""
Assembly of formatted rows into the final listing text.
"""

from typing import Sequence

from rich.cells import cell_len
from rich.text import Text

from dirlist.use_cases.listing.column_layout import ColumnWidths
from dirlist.use_cases.listing.formatting import (
    LONG_COLUMNS,
    RIGHT_ALIGNED,
    Column,
    FormattedRow,
)

COLUMN_PADDING = 2
FIELD_SEPARATOR = " "


def _pad(cell: str, width: int, right: bool) -> str:
    padding = " " * max(0, width - cell_len(cell))
    return padding + cell if right else cell + padding


def render_long(rows: Sequence[FormattedRow], widths: ColumnWidths) -> Text:
    """
    One row per entry: type, size, created, owner, group, name.

    Sizes are right-justified, the other columns left-justified; the name is
    last and left unpadded.
    """
    output = Text()
    for index, row in enumerate(rows):
        if index:
            output.append("\n")
        for column in LONG_COLUMNS[:-1]:
            output.append(_pad(row.cell(column), widths[column], column in RIGHT_ALIGNED))
            output.append(FIELD_SEPARATOR)
        output.append_text(row.name)
    return output


def render_short(rows: Sequence[FormattedRow], widths: ColumnWidths, width: int) -> Text:
    """
    Names packed row by row into a grid no wider than ``width``.

    Every grid column is as wide as the widest name plus padding; at least
    one column is always used.
    """
    output = Text()
    if not rows:
        return output
    column_width = widths[Column.NAME] + COLUMN_PADDING
    per_line = max(1, width // column_width)
    for start in range(0, len(rows), per_line):
        if start:
            output.append("\n")
        line = rows[start : start + per_line]
        for index, row in enumerate(line):
            output.append_text(row.name)
            if index < len(line) - 1:
                output.append(" " * (column_width - cell_len(row.cell(Column.NAME))))
    return output
