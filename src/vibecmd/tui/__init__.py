"""Public API for the vibecmd terminal UI package."""

from .picker import pick_choice
from .prompter import Prompter, TerminalPrompter
from .renderer import console

__all__ = ["Prompter", "TerminalPrompter", "console", "pick_choice"]
