"""Shared fixtures: scripted prompter, config writer, isolated settings."""

from __future__ import annotations

import json

import pytest

from vibecmd.core.config import Settings


class ScriptedPrompter:
    """Prompter fake: replays answers in order and records every question."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.asked: list[tuple[str, str, list[str] | None]] = []

    def _next(self):
        if not self.responses:
            raise AssertionError("prompter ran out of scripted responses")
        return self.responses.pop(0)

    def ask_choice(self, message, choices):
        self.asked.append(("choice", message, list(choices)))
        value = self._next()
        if isinstance(value, int):
            return value
        return choices.index(value)

    def ask_text(self, message, default=""):
        self.asked.append(("text", message, None))
        return self._next()


@pytest.fixture
def write_config(tmp_path):
    def _write(data, name="vc.config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return path

    return _write


@pytest.fixture
def write_files(tmp_path):
    def _write(*rel_paths, content=None):
        for rel in rel_paths:
            p = tmp_path / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(content if content is not None else f"# {rel}\n")

    return _write


@pytest.fixture
def settings(tmp_path):
    return Settings(cwd=tmp_path, global_dir=tmp_path / ".global")
