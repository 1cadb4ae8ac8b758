"""Rich-based status output: glyph-prefixed log lines and pattern reports."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from vibecmd.docs.models import ResolvedCommand, ResolvedDocPattern

console = Console()

ICONS = {
    "error": "❌",
    "success": "✅",
    "warning": "⚠️",
    "info": "💡",
    "folder": "📁",
    "list": "📋",
    "chart": "📊",
    "celebration": "🎉",
}


def _log(icon: str, message: str, style: str) -> None:
    console.print(f"{ICONS[icon]} {escape(message)}", style=style, highlight=False)


def log_error(message: str) -> None:
    _log("error", message, "red")


def log_success(message: str) -> None:
    _log("success", message, "green")


def log_warning(message: str) -> None:
    _log("warning", message, "yellow")


def log_info(message: str) -> None:
    _log("info", message, "blue")


def log_list(message: str) -> None:
    _log("list", message, "blue")


def log_chart(message: str) -> None:
    _log("chart", message, "blue")


def log_celebration(message: str) -> None:
    _log("celebration", message, "blue")


def report_exception(message: str, exc: BaseException, verbose: bool = False) -> None:
    """One human-readable line; the traceback only in verbose mode."""
    log_error(f"{message}: {exc}" if message else str(exc))
    if verbose:
        console.print_exception()


def format_pattern(pattern: ResolvedDocPattern) -> str:
    """Status line (rich markup) for one pattern header."""
    p = escape(pattern.pattern)
    if pattern.error:
        return f"[red]{ICONS['error']} {p} (error: {escape(pattern.error)})[/red]"
    if not pattern.exists:
        return f"[yellow]{ICONS['warning']} {p} (no matching files)[/yellow]"
    return f"[cyan]{ICONS['folder']} {p}[/cyan]"


def print_pattern_report(command: ResolvedCommand) -> int:
    """Print every pattern and its files. Returns the number of files listed."""
    log_chart("Existing files:")
    console.print()
    total = 0
    for pattern in command.patterns:
        console.print(format_pattern(pattern), highlight=False)
        if pattern.exists:
            for f in pattern.matched_files:
                console.print(f"  {ICONS['success']} {escape(f)}", highlight=False)
                total += 1
            console.print()
    log_chart(f"Total files: {total}")
    console.print()
    return total


def print_selected_command(name: str, description: str) -> None:
    console.print()
    log_list(f"Selected command: {name}")
    console.print(f"description: {escape(description)}", style="dim", highlight=False)
    console.print()
