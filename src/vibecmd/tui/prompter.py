"""Prompter: the askChoice/askText capability used by the interactive flow."""

from __future__ import annotations

from typing import Protocol

from prompt_toolkit import prompt as pt_prompt
from prompt_toolkit.formatted_text import HTML

from .picker import pick_choice


class Prompter(Protocol):
    def ask_choice(self, message: str, choices: list[str]) -> int:
        """Return the index of the chosen entry."""
        ...

    def ask_text(self, message: str, default: str = "") -> str: ...


class TerminalPrompter:
    """prompt_toolkit-backed prompter. Cancelling (esc, Ctrl-C, Ctrl-D) raises KeyboardInterrupt."""

    def ask_choice(self, message: str, choices: list[str]) -> int:
        index = pick_choice(message, choices)
        if index is None:
            raise KeyboardInterrupt
        return index

    def ask_text(self, message: str, default: str = "") -> str:
        try:
            return pt_prompt(HTML("<b>? {}</b> ").format(message), default=default).strip()
        except EOFError:
            raise KeyboardInterrupt from None
