"""Inline prompt-toolkit list picker for single-choice questions."""

from __future__ import annotations

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl


def pick_choice(message: str, choices: list[str], default: int = 0) -> int | None:
    """Show *choices* under *message*. Returns the chosen index or None if cancelled."""
    if not choices:
        return None

    selected = [min(max(default, 0), len(choices) - 1)]
    result: list[int | None] = [None]

    def _get_text():
        lines = [("bold", f"? {message}\n")]
        for i, label in enumerate(choices):
            sel = i == selected[0]
            marker = ">" if sel else " "
            lines.append(("bold fg:ansicyan" if sel else "", f" {marker} {label}\n"))
        lines.append(("dim", " ↑/↓ navigate  enter select  esc cancel"))
        return lines

    kb = KeyBindings()

    @kb.add("up")
    @kb.add("k")
    def _up(event):
        selected[0] = max(0, selected[0] - 1)

    @kb.add("down")
    @kb.add("j")
    def _down(event):
        selected[0] = min(len(choices) - 1, selected[0] + 1)

    @kb.add("enter")
    def _select(event):
        result[0] = selected[0]
        event.app.exit()

    @kb.add("escape")
    @kb.add("q")
    @kb.add("c-c")
    def _cancel(event):
        event.app.exit()

    layout = Layout(HSplit([Window(FormattedTextControl(_get_text))]))
    app: Application = Application(layout=layout, key_bindings=kb, full_screen=False)
    app.run()
    return result[0]
