"""GuiAutomation: drive a desktop assistant's chat box through osascript.

Steps are separated by fixed sleeps because the target app sends no
acknowledgement. Under a slow app start the paste can race the focus change;
delivery is best-effort.
"""

from __future__ import annotations

import subprocess
import time
from collections.abc import Callable

from vibecmd.core.config import GuiDelays
from vibecmd.core.errors import AutomationStepError, ClipboardError
from vibecmd.tui.renderer import console

from .base import Assistant, DispatchResult
from .clipboard import copy_to_clipboard


def run_osascript(script: str) -> None:
    subprocess.run(["osascript", "-e", script], check=True, capture_output=True, text=True)


def _keystroke(key: str, command_down: bool = False) -> str:
    if key == "return":
        return 'tell application "System Events" to keystroke return'
    using = " using command down" if command_down else ""
    return f'tell application "System Events" to keystroke "{key}"{using}'


def _quote(value: str) -> str:
    """Escape for an AppleScript string literal; backslashes first."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


class GuiAssistant(Assistant):
    def __init__(
        self,
        key: str,
        label: str,
        app_name: str,
        chat_shortcut: str = "l",
        delays: GuiDelays | None = None,
        submit: bool = True,
        script_runner: Callable[[str], None] = run_osascript,
        clipboard: Callable[[str], None] = copy_to_clipboard,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.key = key
        self.label = label
        self.app_name = app_name
        self.chat_shortcut = chat_shortcut
        self.delays = delays or GuiDelays()
        self.submit = submit
        self._run_script = script_runner
        self._copy = clipboard
        self._sleep = sleep

    def steps(self, prompt: str) -> list[tuple[str, Callable[[], None], float]]:
        """(name, action, pause-after) in execution order."""
        app = _quote(self.app_name)
        plan: list[tuple[str, Callable[[], None], float]] = [
            ("activate", lambda: self._run_script(f'tell application "{app}" to activate'),
             self.delays.activate),
            ("open-chat", lambda: self._run_script(_keystroke(self.chat_shortcut, True)),
             self.delays.shortcut),
            ("clipboard", lambda: self._copy(prompt), self.delays.clipboard),
            ("paste", lambda: self._run_script(_keystroke("v", True)), self.delays.paste),
        ]
        if self.submit:
            plan.append(("submit", lambda: self._run_script(_keystroke("return")), 0.0))
        return plan

    def launch(self, prompt: str, files: list[str], option: str = "") -> DispatchResult:
        for name, action, pause in self.steps(prompt):
            try:
                action()
            except subprocess.CalledProcessError as e:
                detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
                raise AutomationStepError(name, detail) from e
            except (OSError, ValueError, ClipboardError) as e:
                raise AutomationStepError(name, str(e)) from e
            if pause:
                self._sleep(pause)

        console.print(f"sent to {self.label} chat:", style="dim")
        console.print(prompt, markup=False, highlight=False)
        return DispatchResult(assistant=self.key, ok=True, prompt=prompt)


def cursor(
    app_name: str = "Cursor", delays: GuiDelays | None = None, submit: bool = True
) -> GuiAssistant:
    return GuiAssistant("cursor", "Cursor", app_name, delays=delays, submit=submit)
