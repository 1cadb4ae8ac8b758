"""SpawnInteractiveProcess: run an assistant CLI attached to the current terminal."""

from __future__ import annotations

import shlex
import subprocess

from vibecmd.core.errors import AssistantLaunchError, ClipboardError
from vibecmd.tui.renderer import console, log_info, log_warning

from .base import Assistant, DispatchResult
from .clipboard import copy_to_clipboard


class SpawnAssistant(Assistant):
    asks_for_option = True

    def __init__(
        self,
        key: str,
        label: str,
        executable: str,
        inline_prompt: bool = True,
        option_as_args: bool = False,
    ):
        self.key = key
        self.label = label
        self.executable = executable
        # pass the prompt as a positional argument; otherwise pre-seed the clipboard
        self.inline_prompt = inline_prompt
        self.option_as_args = option_as_args
        self.option_in_prompt = not option_as_args

    def build_argv(self, prompt: str, option: str = "") -> list[str]:
        argv = [self.executable]
        if option and self.option_as_args:
            try:
                argv.extend(shlex.split(option))
            except ValueError as e:
                raise AssistantLaunchError(self.label, f"bad option text {option!r}: {e}") from e
        if self.inline_prompt:
            argv.append(prompt)
        return argv

    def launch(self, prompt: str, files: list[str], option: str = "") -> DispatchResult:
        argv = self.build_argv(prompt, option)

        if not self.inline_prompt:
            try:
                copy_to_clipboard(prompt)
                log_info("Prompt copied to the clipboard. Paste it with Cmd+V / Ctrl+V.")
            except ClipboardError as e:
                log_warning(f"{e}; copy the prompt below manually")
            console.print("\n--- prompt ---", style="dim")
            console.print(prompt, markup=False, highlight=False)
            console.print("--- end ---\n", style="dim")

        console.print(f"launching {self.label}...", style="dim")
        try:
            proc = subprocess.run(argv)
        except (FileNotFoundError, PermissionError) as e:
            raise AssistantLaunchError(self.label, f"'{self.executable}' not runnable: {e}") from e
        except (OSError, ValueError) as e:
            # ValueError: NUL byte in argv, e.g. a binary inline doc
            raise AssistantLaunchError(self.label, str(e)) from e

        return DispatchResult(
            assistant=self.key, ok=True, returncode=proc.returncode, prompt=prompt
        )


def claude_code(executable: str = "claude") -> SpawnAssistant:
    return SpawnAssistant(
        "claude", "Claude Code", executable, inline_prompt=True, option_as_args=True
    )


def gemini_cli(executable: str = "gemini") -> SpawnAssistant:
    return SpawnAssistant("gemini", "Gemini CLI", executable, inline_prompt=False)
