"""Console report for search results, rendered with rich."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from globfind.scanner import TraversalResult

REPORT_THEME = Theme(
    {
        "heading": "bold",
        "error_heading": "bold red",
        "error": "red",
    }
)


@dataclass(frozen=True, slots=True)
class SearchReport:
    """Everything the report shows for one run.

    Attributes:
        result: Combined traversal result.
        directories: Roots searched, in order.
        filters: Raw filter patterns as given.
        exclude: Raw exclude pattern, if any.
        include_hidden: Whether hidden files were included.
        content_search: Whether content search was enabled.
        show_parameters: Whether to echo the parameters before the results.
    """

    result: TraversalResult
    directories: tuple[str, ...]
    filters: tuple[str, ...] = ()
    exclude: str | None = None
    include_hidden: bool = False
    content_search: bool = False
    show_parameters: bool = False


def make_consoles() -> tuple[Console, Console]:
    """Return ``(stdout, stderr)`` consoles sharing the report theme."""
    return (
        Console(theme=REPORT_THEME, highlight=False, soft_wrap=True),
        Console(theme=REPORT_THEME, highlight=False, soft_wrap=True, stderr=True),
    )


def _item(text: str, indent: str = "  ", style: str = "") -> Text:
    line = Text(f"{indent}- ")
    line.append(text, style=style)
    return line


def _render_parameters(report: SearchReport, out: Console) -> None:
    out.print()
    out.print("Search Parameters:", style="heading")
    out.print(Text(f"  Exclude pattern: {report.exclude or 'None'}"))
    out.print(f"  Include hidden files: {str(report.include_hidden).lower()}")
    out.print(f"  Search content: {str(report.content_search).lower()}")
    out.print("  Filter patterns:")
    if not report.filters:
        out.print("    None")
    for pattern in report.filters:
        out.print(_item(pattern, indent="    "))
    out.print("  Directories searched:")
    for directory in report.directories:
        out.print(_item(directory, indent="    "))


def render_report(report: SearchReport, out: Console, err: Console) -> None:
    """Print results to *out* and the error summary to *err*.

    Args:
        report: Search report to render.
        out: Console for parameters, matches and the completion line.
        err: Console for permission-denied directories and other errors.
    """
    if report.show_parameters:
        _render_parameters(report, out)

    result = report.result
    out.print()
    out.print("Search Results:", style="heading")
    if not result.files:
        out.print("  No files found matching the criteria.")
    else:
        out.print(f"  Found {len(result.files)} file(s):")
        for path in result.files:
            out.print(_item(path))

    if result.permission_denied:
        err.print()
        err.print("Permission Denied:", style="error_heading")
        for directory in result.permission_denied:
            err.print(_item(directory, style="error"))

    if result.other_error:
        err.print()
        err.print("Errors:", style="error_heading")
        for message in result.errors:
            err.print(Text(f"  {message}", style="error"))

    out.print()
    out.print("Search completed.", style="heading")
