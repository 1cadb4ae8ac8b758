"""The `vc cmd` flow: select -> questions -> pre-commands -> resolve -> dispatch."""

from __future__ import annotations

import subprocess
from pathlib import Path

from vibecmd.core.config import Settings
from vibecmd.core.errors import ConfigNotFound, PreCommandExecutionError, VibeCmdError
from vibecmd.dispatch import Assistant, DispatchResult, dispatch, get_assistant, get_assistants
from vibecmd.docs.loader import load_command_config
from vibecmd.docs.models import CommandConfig, CommandEntry
from vibecmd.docs.resolver import extend_command, resolve_command
from vibecmd.tui.prompter import Prompter
from vibecmd.tui.renderer import (
    console,
    log_error,
    log_warning,
    print_pattern_report,
    print_selected_command,
    report_exception,
)

from .questionnaire import ask_sub_commands


def run_pre_commands(commands: tuple[str, ...] | list[str], cwd: Path) -> None:
    """Run shell pre-commands in order; the first failure aborts."""
    if not commands:
        return
    console.print("\n⚙️  running pre-commands...")
    for cmd in commands:
        console.print(f"$ {cmd}", style="bold", markup=False, highlight=False)
        try:
            proc = subprocess.run(cmd, shell=True, cwd=cwd)
        except OSError as e:
            raise PreCommandExecutionError(cmd, reason=str(e)) from e
        if proc.returncode != 0:
            raise PreCommandExecutionError(cmd, proc.returncode)


def select_command(config: CommandConfig, prompter: Prompter) -> CommandEntry:
    labels = [f"{c.name} - {c.description}" for c in config.commands]
    return config.commands[prompter.ask_choice("Select a command to run:", labels)]


def choose_assistant(settings: Settings, prompter: Prompter) -> Assistant:
    if settings.assistant:
        preset = get_assistant(settings, settings.assistant)
        if preset is not None:
            return preset
        log_warning(f"unknown assistant '{settings.assistant}', choose one")
    assistants = get_assistants(settings)
    index = prompter.ask_choice("Which assistant?", [a.label for a in assistants])
    return assistants[index]


def run_cmd(settings: Settings, prompter: Prompter) -> DispatchResult | None:
    """Full resolution-and-dispatch flow. Raises VibeCmdError on fatal steps."""
    config = load_command_config(settings.config_path)
    if not config.commands:
        log_warning("no commands are defined in the config file")
        return None

    entry = select_command(config, prompter)
    print_selected_command(entry.name, entry.description)

    questions = ask_sub_commands(entry.sub_commands, prompter)

    run_pre_commands(entry.pre_commands, settings.cwd)

    resolved = resolve_command(entry, settings.cwd)
    resolved = extend_command(
        resolved, questions.additional_patterns, settings.cwd, entry.ignore_patterns
    )

    assistant = choose_assistant(settings, prompter)
    option = ""
    if assistant.asks_for_option:
        option = prompter.ask_text("Options (extra instructions, optional):")
        print_pattern_report(resolved)

    return dispatch(
        assistant,
        resolved,
        questions.answers,
        option,
        base=settings.cwd,
        verbose=settings.verbose,
    )


def handle_cmd(settings: Settings, prompter: Prompter) -> DispatchResult | None:
    """CLI wrapper: every error becomes one status line; never raises."""
    try:
        return run_cmd(settings, prompter)
    except ConfigNotFound as e:
        log_error(str(e))
        log_warning("run `vc init` to create the config file")
    except (KeyboardInterrupt, EOFError):
        console.print("\ninterrupted", style="dim")
    except VibeCmdError as e:
        report_exception("command failed", e, settings.verbose)
    return None
