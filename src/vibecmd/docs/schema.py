"""JSON schema for vc.config.json and exhaustive validation."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator

from vibecmd.core.errors import Violation

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

ANSWER_SCHEMA: dict = {
    "anyOf": [
        {"type": "string"},
        {
            "type": "object",
            "required": ["label"],
            "properties": {
                "label": {"type": "string"},
                "docs": _STRING_LIST,
            },
        },
    ]
}

SUB_COMMAND_SCHEMA: dict = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
        "question": {"type": "string"},
        "answers": {"type": "array", "items": ANSWER_SCHEMA},
    },
}

COMMAND_SCHEMA: dict = {
    "type": "object",
    "required": ["description", "docs"],
    "properties": {
        "description": {"type": "string"},
        "docs": _STRING_LIST,
        "ignoreDocs": _STRING_LIST,
        "inlineDocs": _STRING_LIST,
        "preCommands": _STRING_LIST,
        "sub-commands": {"type": "array", "items": SUB_COMMAND_SCHEMA},
    },
}

CONFIG_SCHEMA: dict = {
    "type": "object",
    "required": ["commands"],
    "properties": {
        "docsDirectory": {"type": "string"},
        "commands": {
            "type": "array",
            "items": {
                # one command per element: {"<name>": {...}}
                "type": "object",
                "minProperties": 1,
                "maxProperties": 1,
                "additionalProperties": COMMAND_SCHEMA,
            },
        },
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def _pointer(parts) -> str:
    return "/" + "/".join(str(p) for p in parts) if parts else ""


def _sort_key(parts) -> list:
    return [(0, p, "") if isinstance(p, int) else (1, 0, str(p)) for p in parts]


def _duplicate_names(data: Any) -> list[Violation]:
    if not isinstance(data, dict) or not isinstance(data.get("commands"), list):
        return []
    seen: dict[str, int] = {}
    found: list[Violation] = []
    for i, item in enumerate(data["commands"]):
        if not isinstance(item, dict) or len(item) != 1:
            continue
        name = next(iter(item))
        if name in seen:
            found.append(
                Violation(
                    f"/commands/{i}",
                    f"duplicate command name '{name}' (first defined at /commands/{seen[name]})",
                )
            )
        else:
            seen[name] = i
    return found


def validate_config(data: Any) -> list[Violation]:
    """Return every violation in *data*; empty list means valid."""
    errors = sorted(_validator.iter_errors(data), key=lambda e: _sort_key(e.absolute_path))
    violations = [Violation(_pointer(e.absolute_path), e.message) for e in errors]
    violations.extend(_duplicate_names(data))
    return violations
