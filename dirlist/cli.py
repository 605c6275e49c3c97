import argparse
import logging
import shutil
import sys

from rich.console import Console

from dirlist import __version__
from dirlist.config.listing import ListingConfiguration, SortKey
from dirlist.exceptions import ConfigurationError


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --human, so help is long-only
    parser = argparse.ArgumentParser(
        prog="dirlist",
        description="List directory contents as a grid or an aligned table.",
        add_help=False,
    )
    parser.add_argument(
        "paths", nargs="*", default=["."], metavar="PATH", help="Directories or files to list"
    )
    parser.add_argument(
        "-c",
        "--colourize",
        dest="colourize",
        action="store_false",
        help="Colour files/folders by type, specify to disable colouring",
    )
    parser.add_argument(
        "-h", "--human", action="store_true", help="Show file sizes in a human readable format"
    )
    parser.add_argument("-l", "--long", action="store_true", help="Print long form output")
    parser.add_argument("-a", "--all", action="store_true", help="Print all items in directory")
    parser.add_argument(
        "-s",
        "--sort",
        choices=[key.value for key in SortKey],
        default=SortKey.NAME.value,
        help="Sort entries by name, size or creation time (default: name)",
    )
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order")
    parser.add_argument(
        "-n",
        "--numeric-uid-gid",
        dest="numeric_ids",
        action="store_true",
        help="Show numeric owner and group ids instead of names",
    )
    parser.add_argument(
        "-w", "--width", type=_positive_int, default=None, help="Output width for the grid"
    )
    parser.add_argument("--help", action="help", help="Print help message")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ListingConfiguration:
    return ListingConfiguration(
        paths=args.paths,
        show_all=args.all,
        long_form=args.long,
        colourize=args.colourize,
        human_readable=args.human,
        numeric_ids=args.numeric_ids,
        sort_key=SortKey(args.sort),
        reverse=args.reverse,
        width=args.width,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

    # settings are read from the environment on first import
    try:
        from dirlist.config.settings import settings
        from dirlist.container import container
        from dirlist.use_cases.listing.formatting import printable
    except ConfigurationError as e:
        err_console.print(f"dirlist: {e}", markup=False)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    width = config.width or shutil.get_terminal_size(fallback=(settings.default_width, 24)).columns

    console = Console(highlight=False, emoji=False, soft_wrap=True, no_color=not config.colourize)

    use_case = container.get_list_directory_use_case()
    report = use_case.execute_all(config, width)

    for failure in report.failures:
        reason = getattr(failure.error, "reason", str(failure.error))
        err_console.print(
            f"dirlist: cannot access '{printable(failure.path)}': {reason}", markup=False
        )

    show_headers = len(config.paths) > 1
    for index, result in enumerate(report.results):
        if show_headers:
            if index:
                console.print()
            console.print(f"{printable(result.path)}:", markup=False)
        if result.text.plain:
            console.print(result.text)

    return 0 if report.ok else 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
