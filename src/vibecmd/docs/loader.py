"""ConfigLoader: read vc.config.json, validate, convert to tagged records."""

from __future__ import annotations

import json
from pathlib import Path

from vibecmd.core.config import DEFAULT_DOCS_DIR
from vibecmd.core.errors import ConfigNotFound, ConfigParseError, SchemaValidationError

from .models import Answer, CommandConfig, CommandEntry, SubCommand
from .schema import validate_config


def _parse_answer(raw) -> Answer:
    if isinstance(raw, str):
        return Answer(label=raw)
    return Answer(label=raw["label"], extra_doc_patterns=tuple(raw.get("docs", [])))


def _parse_sub_command(raw: dict) -> SubCommand:
    return SubCommand(
        name=raw["name"],
        question=raw.get("question", ""),
        answers=tuple(_parse_answer(a) for a in raw.get("answers", [])),
    )


def _parse_entry(name: str, raw: dict) -> CommandEntry:
    return CommandEntry(
        name=name,
        description=raw.get("description") or "(none)",
        doc_patterns=tuple(raw["docs"]),
        ignore_patterns=tuple(raw.get("ignoreDocs", [])),
        inline_doc_patterns=tuple(raw.get("inlineDocs", [])),
        pre_commands=tuple(raw.get("preCommands", [])),
        sub_commands=tuple(_parse_sub_command(s) for s in raw.get("sub-commands", [])),
    )


def parse_config(data: dict) -> CommandConfig:
    """Validate *data* and turn each {"name": {...}} element into a CommandEntry."""
    violations = validate_config(data)
    if violations:
        raise SchemaValidationError(violations)

    entries = []
    for item in data["commands"]:
        name, raw = next(iter(item.items()))
        entries.append(_parse_entry(name, raw))
    return CommandConfig(
        commands=tuple(entries),
        docs_directory=data.get("docsDirectory") or DEFAULT_DOCS_DIR,
    )


def load_command_config(path: Path) -> CommandConfig:
    """Load and validate the command config at *path*. Pure read."""
    if not path.is_file():
        raise ConfigNotFound(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, f"{e.msg} (line {e.lineno}, column {e.colno})") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, f"not UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ConfigParseError(path, str(e)) from e
    return parse_config(data)
