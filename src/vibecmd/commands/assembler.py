"""PromptAssembler: ResolvedCommand + answers -> prompt text, and @file references."""

from __future__ import annotations

from pathlib import Path

from vibecmd.core.errors import InlineDocReadError
from vibecmd.core.utils import read_text
from vibecmd.docs.models import ResolvedCommand

PURPOSE_LABEL = "Purpose"
ANSWERS_HEADER = "Inputs:"
OPTION_LABEL = "Additional options"


def render_inline_docs(command: ResolvedCommand, base: Path) -> str:
    """Contents of every inline doc file, pattern-then-file order, each + blank line."""
    parts: list[str] = []
    for rel in command.inline_doc_files:
        try:
            content = read_text(base / rel)
        except OSError as e:
            raise InlineDocReadError(rel, str(e)) from e
        parts.append(content.rstrip("\n") + "\n\n")
    return "".join(parts)


def build_prompt_body(
    command: ResolvedCommand,
    answers: dict[str, str],
    option: str = "",
    base: Path | None = None,
) -> str:
    body = render_inline_docs(command, base or Path.cwd())
    body += f"{command.name}\n\n{PURPOSE_LABEL}: {command.description}"

    if answers:
        body += f"\n\n{ANSWERS_HEADER}"
        for name, answer in answers.items():
            body += f"\n- {name}: {answer}"

    if option:
        body += f"\n\n{OPTION_LABEL}: {option}"

    return body


def referenced_files(command: ResolvedCommand) -> list[str]:
    """Files of every existing pattern, deduplicated by path, first occurrence wins."""
    seen: dict[str, None] = {}
    for pattern in command.patterns:
        if pattern.exists:
            for f in pattern.matched_files:
                seen.setdefault(f, None)
    return list(seen)


def build_file_references(command: ResolvedCommand) -> str:
    return "".join(f"@{f} " for f in referenced_files(command))


def assemble_prompt(
    command: ResolvedCommand,
    answers: dict[str, str],
    option: str = "",
    base: Path | None = None,
    include_references: bool = True,
) -> str:
    body = build_prompt_body(command, answers, option, base)
    if include_references:
        return build_file_references(command) + body
    return body
