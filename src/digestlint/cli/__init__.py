"""
CLI for digestlint.

Provides the command-line interface for checking that static asset files are
named after a digest of their content.
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from digestlint.cli.ui import render_error, render_json, render_report
from digestlint.core.config import DigestLintConfig, load_config
from digestlint.core.errors import ConfigurationError, TraversalError
from digestlint.core.logging_utils import configure_logging
from digestlint.core.path_utils import validate_scan_root
from digestlint.core.scanner import Report, Scanner, merge_reports

# Initialize Rich Consoles
console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

app = typer.Typer(
    name="digestlint",
    help="Check that static asset filenames contain a digest of their content",
    add_completion=False,
)


def _load_config_or_exit(config_path: Optional[Path]) -> DigestLintConfig:
    """Load configuration, exiting with status 1 if it is unusable."""
    load_dotenv()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ConfigurationError) as e:
        render_error(err_console, str(e))
        raise typer.Exit(1)


@app.command()
def check(
    dirs: list[Path] = typer.Argument(..., help="Directories containing files to check"),
    skip: Optional[list[str]] = typer.Option(
        None,
        "--skip",
        "-s",
        help="Skip checking files with names matching this regex. Can be specified multiple times.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print the names of files with valid names"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print the merged report as JSON instead of a summary"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (.yaml, .yml or .json)"
    ),
):
    """Check every file beneath the given directories."""
    cfg = _load_config_or_exit(config_path)
    configure_logging(cfg.logging)

    for path in dirs:
        validation = validate_scan_root(path)
        if not validation.valid:
            render_error(err_console, validation.error_message)
            raise typer.Exit(1)

    patterns = list(cfg.scan.skip_patterns) + list(skip or [])
    try:
        scanner = Scanner(patterns)
    except ConfigurationError as e:
        render_error(err_console, str(e))
        raise typer.Exit(1)

    exit_error = False

    reports: list[Report] = []
    for path in dirs:
        try:
            reports.append(scanner.scan_directory(path))
        except TraversalError as e:
            render_error(err_console, str(e))
            exit_error = True

    for report in reports:
        for _, file_error in sorted(report.file_errors.items()):
            render_error(err_console, str(file_error))
            exit_error = True

    merged = merge_reports(reports)

    if json_output:
        render_json(console, merged)
        if exit_error or merged.has_problems:
            raise typer.Exit(1)
        return

    # An incomplete walk or unreadable files is a different kind of failure
    # than files that don't pass, so stop before summarising.
    if exit_error:
        raise typer.Exit(1)

    if render_report(console, err_console, merged, verbose or cfg.report.verbose):
        raise typer.Exit(1)


@app.command()
def config(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (.yaml, .yml or .json)"
    ),
    output_format: str = typer.Option(
        "yaml", "--format", "-f", help="Output format: yaml or json"
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the configuration to this file instead"
    ),
):
    """Show the effective configuration, or write it to a file."""
    cfg = _load_config_or_exit(config_path)

    if output_path is not None:
        try:
            cfg.save(output_path)
        except ConfigurationError as e:
            render_error(err_console, str(e))
            raise typer.Exit(1)
        console.print(f"Configuration written to {output_path}", markup=False)
        return

    if output_format == "yaml":
        content = cfg.to_yaml()
    elif output_format == "json":
        content = cfg.to_json()
    else:
        render_error(err_console, f"Unsupported format: {output_format}")
        raise typer.Exit(1)

    console.print(content, markup=False, end="")


if __name__ == "__main__":
    app()
