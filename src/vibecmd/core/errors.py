"""Error taxonomy: config, resolution, pre-command and dispatch failures."""

from __future__ import annotations

from dataclasses import dataclass


class VibeCmdError(Exception):
    """Base class for every error the CLI reports as a single status line."""


class ConfigNotFound(VibeCmdError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"{path.name} not found")


class ConfigParseError(VibeCmdError):
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot parse {path.name}: {reason}")


@dataclass(frozen=True)
class Violation:
    """One schema violation: JSON-pointer style path + message."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path or '/'} {self.message}"


class SchemaValidationError(VibeCmdError):
    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        lines = "\n".join(f"  {v}" for v in self.violations)
        super().__init__(f"config schema error ({len(self.violations)} violation(s)):\n{lines}")


class CommandNotFound(VibeCmdError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'command "{name}" not found')


class PatternExpansionError(VibeCmdError):
    """Raised by a single glob expansion; recorded on the pattern, never propagated."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(reason)


class InlineDocReadError(VibeCmdError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"cannot read inline doc {path}: {reason}")


class PreCommandExecutionError(VibeCmdError):
    def __init__(self, command: str, returncode: int | None = None, reason: str = ""):
        self.command = command
        self.returncode = returncode
        detail = reason or f"exit code {returncode}"
        super().__init__(f'pre-command "{command}" failed ({detail})')


class ClipboardError(VibeCmdError):
    pass


class AssistantLaunchError(VibeCmdError):
    def __init__(self, assistant: str, reason: str):
        self.assistant = assistant
        super().__init__(f"failed to launch {assistant}: {reason}")


class AutomationStepError(VibeCmdError):
    def __init__(self, step: str, reason: str):
        self.step = step
        super().__init__(f"automation step '{step}' failed: {reason}")
