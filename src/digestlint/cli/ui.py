"""
UI components module for the digestlint CLI.

Renders scan reports, warnings and errors to Rich consoles.
"""

import json
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from digestlint.core.scanner import Report


def _quote(path: str) -> str:
    """Quote a path the same way regardless of what characters it holds."""
    return escape(json.dumps(path, ensure_ascii=False))


def render_error(console: Console, message: str) -> None:
    """Render an ``ERROR:`` line."""
    console.print(f"[bold red]ERROR:[/bold red] {escape(message)}")


def render_warning(console: Console, message: str) -> None:
    """Render a ``WARNING:`` line."""
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(message)}")


def render_path_list(
    console: Console,
    label: str,
    header: str,
    paths: Sequence[str],
    show_paths: bool = True,
) -> None:
    """
    Render a count header optionally followed by one quoted path per line.

    Args:
        console: Rich Console instance for output.
        label: Severity label, e.g. ``ERROR`` or ``INFO``.
        header: Text after the label; ``{count}`` is replaced by len(paths).
        paths: Paths to list, already sorted.
        show_paths: Whether to list the paths or just the count.
    """
    styles = {"ERROR": "bold red", "WARNING": "bold yellow", "INFO": "bold blue"}
    style = styles.get(label, "bold")
    text = escape(header.format(count=len(paths)))

    if not show_paths:
        console.print(f"[{style}]{label}:[/{style}] {text}")
        return

    console.print(f"[{style}]{label}:[/{style}] {text}:")
    for path in paths:
        console.print(f"\t{_quote(path)}")


def render_report(console: Console, err_console: Console, report: Report, verbose: bool) -> bool:
    """
    Render a merged report.

    Non-regular and misnamed files are listed on ``err_console``; skipped and
    passed files are counted (and listed when verbose) on ``console``.

    Returns:
        True if the report contains files that make the check fail.
    """
    failed = False

    if report.non_regular:
        render_path_list(err_console, "ERROR", "found {count} non-regular files", report.non_regular)
        failed = True

    if report.failed:
        render_path_list(err_console, "ERROR", "found {count} files with invalid names", report.failed)
        failed = True

    render_path_list(console, "INFO", "skipped checking {count} files", report.skipped, show_paths=verbose)

    if not report.passed and not report.skipped:
        render_warning(err_console, "no files with valid names found")
        return failed

    render_path_list(console, "INFO", "found {count} files with valid names", report.passed, show_paths=verbose)
    return failed


def render_json(console: Console, report: Report) -> None:
    """Render a report as JSON."""
    console.print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), markup=False, highlight=False)
