"""`studentinfo-validate` command.

Checks a student info file (Name, UOB ID, GitHub Username) and exits with 0
when every field is valid and the GitHub user exists, 1 otherwise.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.github_lookup import GitHubUserChecker
from adapters.json_exporter import export_report_json
from cli.ui_components import (
    configure_logging,
    log_error,
    log_info,
    log_result,
    log_success,
    print_banner,
    print_contents,
    print_summary,
)
from core.config import AppSettings
from core.domain.models import ValidationReport
from core.interfaces.checker import UsernameExistenceChecker
from core.services.extraction import StudentInfoFileNotFound, load_file
from core.services.validation import PipelineHooks, run_validation

app = typer.Typer(add_completion=False, help="Validate a student info file.")

_console = Console()


def build_checker(settings: AppSettings) -> UsernameExistenceChecker:
    return GitHubUserChecker(settings)


def _load_settings(timeout: float | None) -> AppSettings:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid STUDENTINFO_* configuration:\n{exc}") from exc
    if timeout is not None:
        settings = settings.model_copy(update={"http_timeout_seconds": timeout})
    return settings


def _export(report: ValidationReport, output_path: Path, *, annotate: bool) -> bool:
    """Write the JSON report; a write failure is reported, not raised."""

    try:
        written = export_report_json(report=report, output_path=output_path)
    except OSError as exc:
        log_error(_console, f"Could not write JSON report to {output_path}: {exc}", annotate=annotate)
        return False
    log_info(_console, f"JSON report written to {written}")
    return True


@app.command()
def validate(
    path: Path | None = typer.Argument(
        None,
        help="Student info file to check (defaults to studentinfo.txt).",
        show_default=False,
    ),
    show_contents: bool = typer.Option(
        True,
        "--show-contents/--hide-contents",
        help="Echo the file contents before checking it.",
    ),
    annotations: bool = typer.Option(
        True,
        "--annotations/--no-annotations",
        help="Emit GitHub Actions ::error:: annotations (STUDENTINFO_ANNOTATIONS=false also disables them).",
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Print the header banner."),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        min=0.1,
        help="HTTP timeout for the GitHub lookup, in seconds.",
    ),
    json_output: Path | None = typer.Option(
        None,
        "--json-output",
        dir_okay=False,
        help="Also write the report as JSON to this path (written even when the input file is missing).",
    ),
) -> None:
    """Validate Name, UOB ID and GitHub Username in a student info file."""

    settings = _load_settings(timeout)
    configure_logging(settings.log_level)
    annotate = annotations and settings.annotations
    target = path or settings.default_file

    if banner:
        print_banner(_console)
    log_info(_console, f"Checking file: {target}")

    try:
        document = load_file(target)
    except StudentInfoFileNotFound as exc:
        log_error(_console, str(exc), annotate=annotate)
        if json_output is not None:
            _export(ValidationReport(path=target, file_found=False), json_output, annotate=annotate)
        raise typer.Exit(code=1) from exc

    if show_contents:
        print_contents(_console, document)

    hooks = PipelineHooks(
        note=lambda message: log_success(_console, message),
        lookup_start=lambda username: log_info(_console, f"Verifying GitHub user '{username}' exists..."),
        result=lambda result: log_result(_console, result, annotate=annotate),
    )
    report = asyncio.run(run_validation(document, checker=build_checker(settings), hooks=hooks))

    exported = json_output is None or _export(report, json_output, annotate=annotate)
    failed = report.failed or not exported
    print_summary(_console, failed=failed)
    raise typer.Exit(code=1 if failed else 0)


def run() -> None:
    app()
