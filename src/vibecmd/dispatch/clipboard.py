"""System clipboard access (shared with the whole OS, no locking)."""

from __future__ import annotations

import pyperclip

from vibecmd.core.errors import ClipboardError


def copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"clipboard unavailable: {e}") from e
