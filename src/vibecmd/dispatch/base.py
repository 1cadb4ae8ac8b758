"""Assistant strategy interface and dispatch result."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class DispatchResult:
    assistant: str
    ok: bool
    returncode: int | None = None
    error: str = ""
    prompt: str = ""


class Assistant(ABC):
    """One assistant family. New families subclass this; nothing else changes."""

    key: str = ""
    label: str = ""
    # '@path' references are understood by the destination
    accepts_file_references: bool = True
    # ask the user for free option text before launching
    asks_for_option: bool = False
    # option text goes into the prompt body (otherwise the strategy consumes it)
    option_in_prompt: bool = False

    @abstractmethod
    def launch(self, prompt: str, files: list[str], option: str = "") -> DispatchResult:
        """Deliver *prompt*. Raises AssistantLaunchError / AutomationStepError."""
