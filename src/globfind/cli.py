"""CLI entry point for gfind: I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import sys

from globfind import __version__
from globfind.filter import compile_pattern, compile_patterns
from globfind.report import SearchReport, make_consoles, render_report
from globfind.scanner import SearchConfig, search


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``gfind`` command.
    """
    parser = argparse.ArgumentParser(
        prog="gfind",
        description="Recursively find files by name pattern and content",
    )
    parser.add_argument(
        "additional_dirs",
        nargs="*",
        default=[],
        metavar="DIRECTORY",
        help="Directories to search (default: current directory)",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        default=None,
        metavar="PATTERN",
        help="Exclude file names matching pattern (does not hide content matches)",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="include_hidden",
        help="Include hidden files (starting with .)",
    )
    parser.add_argument(
        "-f",
        "--filter",
        action="extend",
        nargs="+",
        default=[],
        dest="filters",
        metavar="PATTERN",
        help="Only match names (or lines, with -c) matching a pattern; "
        "'*' matches any characters; values are split on single spaces and "
        "an empty piece matches empty names or lines",
    )
    parser.add_argument(
        "-d",
        "--dir",
        action="append",
        default=[],
        dest="dirs",
        metavar="DIRECTORY",
        help="Directory to search (can be specified multiple times)",
    )
    parser.add_argument(
        "-c",
        "--content",
        action="store_true",
        dest="content_search",
        help="Search for content within files",
    )
    parser.add_argument(
        "-p",
        "--parameter-show",
        action="store_true",
        dest="show_parameters",
        help="Show the search parameters before the results",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        dest="respect_gitignore",
        help="Skip entries ignored by each root's .gitignore",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and dropped patterns to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _split_filters(values: list[str]) -> list[str]:
    """Split each ``-f`` value on single spaces.

    Empty pieces are kept as ``""`` patterns, which only match empty
    names or empty lines.

    Args:
        values: Raw ``-f`` values.

    Returns:
        list[str]: Individual patterns in command-line order.
    """
    return [piece for value in values for piece in value.split(" ")]


def _resolve_directories(args: argparse.Namespace) -> list[str]:
    """Return ``-d`` roots followed by positional roots, or ``["."]``."""
    directories = [*args.dirs, *args.additional_dirs]
    return directories or ["."]


def _build_config(args: argparse.Namespace, filters: list[str]) -> SearchConfig:
    """Compile CLI patterns into a search configuration.

    Args:
        args: Parsed CLI namespace.
        filters: Split filter patterns.

    Returns:
        SearchConfig: Configuration for the whole run.
    """
    exclude = compile_pattern(args.exclude) if args.exclude is not None else None
    return SearchConfig(
        exclude=exclude,
        filters=compile_patterns(filters),
        include_hidden=args.include_hidden,
        content_search=args.content_search,
        respect_gitignore=args.respect_gitignore,
    )


def _run_with_args(args: argparse.Namespace) -> SearchReport:
    """Run the search for parsed arguments.

    Args:
        args: Parsed CLI namespace.

    Returns:
        SearchReport: Result bundle ready for rendering.
    """
    filters = _split_filters(args.filters)
    config = _build_config(args, filters)
    directories = _resolve_directories(args)

    result = search(directories, config)
    return SearchReport(
        result=result,
        directories=tuple(directories),
        filters=tuple(filters),
        exclude=args.exclude,
        include_hidden=args.include_hidden,
        content_search=args.content_search,
        show_parameters=args.show_parameters,
    )


def run_search(argv: list[str] | None = None) -> SearchReport:
    """Run gfind with provided CLI args and return the report data.

    Nothing is printed; this is the primary test target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments.

    Returns:
        SearchReport: Result bundle for ``render_report``.
    """
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    return _run_with_args(args)


def main() -> None:
    """Run the CLI entry point with process arguments.

    Only argument errors end the process early (argparse exits 2).
    Traversal errors are part of the report and do not change the exit code.
    """
    parser = build_parser()
    args = parser.parse_intermixed_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )

    report = _run_with_args(args)
    out, err = make_consoles()
    render_report(report, out, err)
