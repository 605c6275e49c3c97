"""
Tests for the ColumnLayout.
"""

from rich.cells import cell_len

from dirlist.config.listing import ListingConfiguration
from dirlist.entities.Entry import Entry, EntryKind
from dirlist.use_cases.listing.column_layout import ColumnLayout
from dirlist.use_cases.listing.formatting import LONG_COLUMNS, Column, EntryFormatter


def rows_for(entries, **options):
    formatter = EntryFormatter(ListingConfiguration(long_form=True, **options))
    return [formatter.format(entry) for entry in entries]


ENTRIES = [
    Entry(name="a", path="/a", kind=EntryKind.FILE, size_bytes=5, owner_id=0, group_id=0,
          owner_name="root", group_name="wheel"),
    Entry(name="longer-name.txt", path="/l", kind=EntryKind.FILE, size_bytes=1536000,
          owner_id=501, group_id=20, owner_name="alice", group_name=None),
    Entry(name="sub", path="/sub", kind=EntryKind.DIRECTORY, owner_id=501, group_id=20),
]


class TestColumnLayout:
    """Test cases for the ColumnLayout."""

    def test_widths_cover_every_field(self):
        """Test each computed width is at least every field it aligns."""
        rows = rows_for(ENTRIES)

        widths = ColumnLayout.from_rows(rows).widths

        for row in rows:
            for column in LONG_COLUMNS:
                assert cell_len(row.cell(column)) <= widths[column]

    def test_widths_are_maxima(self):
        """Test each width equals the widest field of its column."""
        widths = ColumnLayout.from_rows(rows_for(ENTRIES)).widths

        assert widths[Column.TYPE] == 1
        assert widths[Column.SIZE] == len("1536000")
        assert widths[Column.OWNER] == len("alice")
        assert widths[Column.GROUP] == len("wheel")
        assert widths[Column.NAME] == len("longer-name.txt")

    def test_widths_follow_rendered_size(self):
        """Test the size width uses the human-readable string, not the byte count."""
        widths = ColumnLayout.from_rows(rows_for(ENTRIES, human_readable=True)).widths

        assert widths[Column.SIZE] == len("1.5MB")

    def test_incremental_observe(self):
        """Test widths grow as rows are observed."""
        rows = rows_for(ENTRIES)
        layout = ColumnLayout()

        layout.observe(rows[0])
        assert layout.widths[Column.NAME] == 1

        layout.observe(rows[1])
        layout.observe(rows[2])
        assert layout.widths[Column.NAME] == len("longer-name.txt")

    def test_selected_columns_only(self):
        """Test a layout tracks only the columns it was given."""
        layout = ColumnLayout.from_rows(rows_for(ENTRIES), columns=(Column.NAME,))

        assert layout.widths == {Column.NAME: len("longer-name.txt")}

    def test_wide_characters_use_cell_width(self):
        """Test double-width characters count as two cells."""
        rows = rows_for([Entry(name="日本語", path="/j")])

        assert ColumnLayout.from_rows(rows).widths[Column.NAME] == 6

    def test_empty_rows(self):
        """Test an empty listing has zero widths."""
        widths = ColumnLayout.from_rows([]).widths

        assert all(width == 0 for width in widths.values())

    def test_widths_are_a_copy(self):
        """Test callers cannot change the tracked widths."""
        layout = ColumnLayout.from_rows(rows_for(ENTRIES))

        layout.widths[Column.NAME] = 0

        assert layout.widths[Column.NAME] == len("longer-name.txt")
