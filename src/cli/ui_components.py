"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Every report line goes through the same helpers, so tags stay consistent
  (ERROR/PASS/INFO) and CI annotations are never forgotten.
"""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from core.domain.models import StudentInfoDocument, ValidationResult


def print_banner(console: Console) -> None:
    title = Text("Student Info File Validator", style="bold cyan")
    subtitle = Text("Name • UOB ID • GitHub Username", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(0, 4)))


def _annotation_data(message: str) -> str:
    # Workflow commands are line based; these three characters must be encoded.
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def log_error(console: Console, message: str, *, annotate: bool = True) -> None:
    """Error line plus a GitHub Actions annotation (plain text, one line)."""

    console.print(f"[red]❌ ERROR: {escape(message)}[/red]", emoji=False, soft_wrap=True)
    if annotate:
        console.print(f"::error::{_annotation_data(message)}", markup=False, highlight=False, emoji=False, soft_wrap=True)


def log_success(console: Console, message: str) -> None:
    console.print(f"[green]✅ PASS: {escape(message)}[/green]", emoji=False, soft_wrap=True)


def log_info(console: Console, message: str) -> None:
    console.print(f"[yellow]ℹ️  INFO: {escape(message)}[/yellow]", emoji=False, soft_wrap=True)


def log_result(console: Console, result: ValidationResult, *, annotate: bool = True) -> None:
    if result.valid:
        log_success(console, result.message)
    else:
        log_error(console, result.message, annotate=annotate)


def print_contents(console: Console, document: StudentInfoDocument) -> None:
    console.print()
    console.print("--- File Contents ---", style="dim")
    console.print(document.content.rstrip("\n"), markup=False, highlight=False, emoji=False, soft_wrap=True)
    console.print("---------------------", style="dim")
    console.print()


def print_summary(console: Console, *, failed: bool) -> None:
    console.print()
    if failed:
        console.rule("[bold red]VALIDATION FAILED[/bold red]", style="red")
    else:
        console.rule("[bold green]ALL CHECKS PASSED[/bold green]", style="green")


LOG_HANDLER_NAME = "studentinfo-rich"


def configure_logging(level: str) -> None:
    """Route stdlib logging through Rich on stderr; stdout stays the report.

    The handler is attached once; later calls only adjust the level and leave
    any other root handlers in place.
    """

    root = logging.getLogger()
    root.setLevel(level)
    if any(h.get_name() == LOG_HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
    )
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
