"""
Use case for listing one or more paths.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from rich.text import Text

from dirlist.config.listing import ListingConfiguration
from dirlist.config.settings import DEFAULT_TIME_FORMAT
from dirlist.entities.Entry import Entry
from dirlist.exceptions import FileRepositoryError
from dirlist.ports.files.entry_collector_port import EntryCollectorPort
from dirlist.use_cases.listing.column_layout import ColumnLayout
from dirlist.use_cases.listing.formatting import Column, EntryFormatter
from dirlist.use_cases.listing.rendering import render_long, render_short
from dirlist.use_cases.listing.resolve_attributes import AttributeResolver
from dirlist.use_cases.listing.sorting import sort_entries

DEFAULT_WIDTH = 80


@dataclass(frozen=True)
class ListingResult:
    path: str
    entries: list[Entry]
    text: Text


@dataclass(frozen=True)
class ListingFailure:
    path: str
    error: FileRepositoryError


@dataclass
class ListingReport:
    """Outcome of listing every configured path."""

    results: list[ListingResult] = field(default_factory=list)
    failures: list[ListingFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class ListDirectoryUseCase:
    """Use case for listing the entries under paths."""

    def __init__(
        self,
        collector: EntryCollectorPort,
        attribute_resolver: AttributeResolver,
        logger: Optional[logging.Logger] = None,
        time_format: str = DEFAULT_TIME_FORMAT,
    ):
        """
        Initialize the use case.

        Args:
            collector: Port used to read the listed paths
            attribute_resolver: Resolver decorating collected entries
            logger: Logger instance to use for logging
            time_format: strftime format of the creation time column
        """
        self._collector = collector
        self._attribute_resolver = attribute_resolver
        self._logger = logger or logging.getLogger(__name__)
        self._time_format = time_format

    def execute(
        self, path: str, config: ListingConfiguration, width: int = DEFAULT_WIDTH
    ) -> ListingResult:
        """
        List a single path.

        Args:
            path: Directory or file to list
            config: Listing options
            width: Output width used by the short form

        Returns:
            ListingResult with the ordered entries and the rendered text

        Raises:
            PathNotFoundError: If the path does not exist
            PathUnreadableError: If the path cannot be read
            FileRepositoryError: If listing fails for another reason
        """
        try:
            self._logger.info(f"Listing entries in: {path}")
            entries = self._collector.collect(path, show_all=config.show_all)
            entries = self._attribute_resolver.resolve_all(entries, numeric_ids=config.numeric_ids)
            entries = sort_entries(entries, config.sort_key, config.reverse)

            formatter = EntryFormatter(config, self._time_format)
            rows = [formatter.format(entry) for entry in entries]
            if config.long_form:
                layout = ColumnLayout.from_rows(rows)
                text = render_long(rows, layout.widths)
            else:
                layout = ColumnLayout.from_rows(rows, columns=(Column.NAME,))
                text = render_short(rows, layout.widths, width)

            self._logger.info(f"Found {len(entries)} entries")
            return ListingResult(path=path, entries=entries, text=text)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileRepositoryError(f"Failed to list entries in {path}: {str(e)}")

    def execute_all(
        self, config: ListingConfiguration, width: int = DEFAULT_WIDTH
    ) -> ListingReport:
        """
        List every configured path in order.

        A path that fails is recorded in the report and does not stop the
        remaining paths from being listed.
        """
        report = ListingReport()
        for path in config.paths:
            try:
                report.results.append(self.execute(path, config, width))
            except FileRepositoryError as e:
                self._logger.warning(f"Skipping {path}: {e}")
                report.failures.append(ListingFailure(path=path, error=e))
        return report
