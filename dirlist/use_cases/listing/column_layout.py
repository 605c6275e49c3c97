"""
Column width tracking for aligned output.
"""

from typing import Iterable, Sequence

from rich.cells import cell_len

from dirlist.use_cases.listing.formatting import LONG_COLUMNS, Column, FormattedRow

ColumnWidths = dict[Column, int]


class ColumnLayout:
    """
    Running maximum of the rendered width of each column.

    Rows are observed once each; widths are measured in terminal cells on the
    same strings the renderer pads.
    """

    def __init__(self, columns: Sequence[Column] = LONG_COLUMNS):
        self._widths: ColumnWidths = {column: 0 for column in columns}

    def observe(self, row: FormattedRow) -> None:
        for column, current in self._widths.items():
            width = cell_len(row.cell(column))
            if width > current:
                self._widths[column] = width

    @property
    def widths(self) -> ColumnWidths:
        return dict(self._widths)

    @classmethod
    def from_rows(
        cls, rows: Iterable[FormattedRow], columns: Sequence[Column] = LONG_COLUMNS
    ) -> "ColumnLayout":
        layout = cls(columns)
        for row in rows:
            layout.observe(row)
        return layout
