"""Dispatch: assistant registry and the failure-swallowing dispatch entry point."""

from __future__ import annotations

from pathlib import Path

from vibecmd.commands.assembler import assemble_prompt, referenced_files
from vibecmd.core.config import Settings
from vibecmd.core.errors import AssistantLaunchError, AutomationStepError
from vibecmd.docs.models import ResolvedCommand
from vibecmd.tui.renderer import report_exception

from .base import Assistant, DispatchResult
from .gui import GuiAssistant, cursor
from .spawn import SpawnAssistant, claude_code, gemini_cli


def get_assistants(settings: Settings) -> list[Assistant]:
    """All assistant strategies, in menu order."""
    return [
        claude_code(settings.executables.get("claude", "claude")),
        cursor(settings.cursor_app, delays=settings.gui_delays, submit=settings.auto_submit),
        gemini_cli(settings.executables.get("gemini", "gemini")),
    ]


def get_assistant(settings: Settings, key: str) -> Assistant | None:
    for assistant in get_assistants(settings):
        if assistant.key == key:
            return assistant
    return None


def dispatch(
    assistant: Assistant,
    command: ResolvedCommand,
    answers: dict[str, str],
    option: str = "",
    base: Path | None = None,
    verbose: bool = False,
) -> DispatchResult:
    """Assemble the prompt and hand it to *assistant*. Launch failures never propagate."""
    prompt = assemble_prompt(
        command,
        answers,
        option if assistant.option_in_prompt else "",
        base,
        include_references=assistant.accepts_file_references,
    )
    try:
        return assistant.launch(prompt, referenced_files(command), option)
    except (AssistantLaunchError, AutomationStepError) as e:
        report_exception("", e, verbose)
        return DispatchResult(assistant=assistant.key, ok=False, error=str(e), prompt=prompt)


__all__ = [
    "Assistant",
    "DispatchResult",
    "GuiAssistant",
    "SpawnAssistant",
    "claude_code",
    "cursor",
    "dispatch",
    "gemini_cli",
    "get_assistant",
    "get_assistants",
]
