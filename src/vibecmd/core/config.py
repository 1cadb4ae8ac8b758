"""Settings: env, paths, assistant executables, GUI automation delays."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

CONFIG_FILE_NAME = "vc.config.json"
DEFAULT_DOCS_DIR = ".vc"


@dataclass
class GuiDelays:
    """Fixed pauses (seconds) between GUI automation steps.

    No acknowledgement comes back from the target app, so these are the only
    synchronisation. Tune per machine.
    """

    activate: float = 0.3
    shortcut: float = 0.5
    clipboard: float = 0.5
    paste: float = 0.3


@dataclass
class Settings:
    cwd: Path = field(default_factory=Path.cwd)
    global_dir: Path = field(default_factory=lambda: Path.home() / ".vibecmd")
    config_file: str = CONFIG_FILE_NAME
    assistant: str = ""  # empty = ask
    verbose: bool = False
    executables: dict[str, str] = field(
        default_factory=lambda: {"claude": "claude", "gemini": "gemini"}
    )
    cursor_app: str = "Cursor"
    gui_delays: GuiDelays = field(default_factory=GuiDelays)
    auto_submit: bool = True

    @property
    def config_path(self) -> Path:
        return self.cwd / self.config_file

    @property
    def project_dir(self) -> Path:
        return self.cwd / DEFAULT_DOCS_DIR


def _apply_settings(settings: Settings, path: Path) -> None:
    """Apply a single settings.json file to settings."""
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError):
        return
    if not isinstance(data, dict):
        return

    if isinstance(data.get("assistant"), str):
        settings.assistant = data["assistant"]
    if isinstance(data.get("configFile"), str):
        settings.config_file = data["configFile"]
    if isinstance(data.get("cursorApp"), str):
        settings.cursor_app = data["cursorApp"]
    if isinstance(data.get("autoSubmit"), bool):
        settings.auto_submit = data["autoSubmit"]

    if "executables" in data and isinstance(data["executables"], dict):
        settings.executables.update(
            {k: v for k, v in data["executables"].items() if isinstance(v, str) and v}
        )

    delays = data.get("guiDelays")
    if isinstance(delays, dict):
        for key in ("activate", "shortcut", "clipboard", "paste"):
            val = delays.get(key)
            if isinstance(val, (int, float)) and not isinstance(val, bool) and val >= 0:
                setattr(settings.gui_delays, key, float(val))


def load_settings(
    assistant: str | None = None,
    verbose: bool = False,
    cwd: Path | None = None,
) -> Settings:
    """Load settings with priority: CLI args > env > .env > settings.json > defaults."""
    load_dotenv()

    settings = Settings(cwd=cwd) if cwd is not None else Settings()
    settings.verbose = verbose

    _apply_settings(settings, settings.global_dir / "settings.json")
    _apply_settings(settings, settings.project_dir / "settings.json")

    if config_file := os.getenv("VIBECMD_CONFIG"):
        settings.config_file = config_file
    if env_assistant := os.getenv("VIBECMD_ASSISTANT"):
        settings.assistant = env_assistant
    if claude_bin := os.getenv("VIBECMD_CLAUDE_BIN"):
        settings.executables["claude"] = claude_bin
    if gemini_bin := os.getenv("VIBECMD_GEMINI_BIN"):
        settings.executables["gemini"] = gemini_bin
    if cursor_app := os.getenv("VIBECMD_CURSOR_APP"):
        settings.cursor_app = cursor_app

    if assistant:
        settings.assistant = assistant

    return settings
