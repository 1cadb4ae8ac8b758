"""`vc docs list` / `vc docs read`: show resolved patterns without dispatching."""

from __future__ import annotations

from rich.markup import escape

from vibecmd.core.config import Settings
from vibecmd.core.errors import ConfigNotFound, VibeCmdError
from vibecmd.docs.resolver import get_command_docs, read_command_files
from vibecmd.tui.renderer import (
    ICONS,
    console,
    format_pattern,
    log_error,
    log_list,
    log_warning,
    report_exception,
)


def show_docs_list(settings: Settings, command: str | None = None) -> None:
    result = get_command_docs(settings, command)

    if command:
        if not result.commands:
            log_warning(f'command "{command}" not found')
            return
        log_list(f'Doc files for command "{command}":')
        console.print()
        for cmd in result.commands:
            console.print(f"[bold]{ICONS['folder']} {escape(cmd.name)}[/bold]")
            console.print(f"   description: {escape(cmd.description)}", highlight=False)
            console.print("   files:")
            for pattern in cmd.patterns:
                console.print(f"     {format_pattern(pattern)}", highlight=False)
                if pattern.exists:
                    for f in pattern.matched_files:
                        console.print(f"       - {escape(f)}", highlight=False)
            console.print()
        return

    log_list("Available commands:")
    console.print()
    for cmd in result.commands:
        console.print(f"{ICONS['folder']} [bold]{escape(cmd.name)}[/bold]")
        console.print(f"   description: {escape(cmd.description)}", highlight=False)
        console.print(f"   documents: {cmd.total_file_count}")
        console.print()
    log_warning("to see one command in detail:")
    console.print("  vc docs list --command <name>", style="dim")


def show_command_files(settings: Settings, command: str) -> None:
    content, _ = read_command_files(settings, command)
    console.print(content, markup=False, highlight=False)


def handle_docs(settings: Settings, action, *args) -> None:
    """Run a docs action, turning errors into one status line."""
    try:
        action(settings, *args)
    except ConfigNotFound as e:
        log_error(str(e))
        log_warning("run `vc init` to create the config file")
    except VibeCmdError as e:
        report_exception("failed to read docs", e, settings.verbose)
